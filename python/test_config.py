#!/usr/bin/env python3
"""設定クラスのテスト"""
import pytest

from s3_file_upload.errors import ArgumentError, ConfigError
from s3_file_upload.models.config import (
    AWSConfig,
    Credentials,
    UploadRequest,
    parse_ignored_directories,
)


def test_credentials_loading(credentials_file):
    """唯一のセクションからキーを読み込めるか確認"""
    credentials = Credentials.from_file(str(credentials_file))
    assert credentials.access_key_id == "AKIAEXAMPLE"
    assert credentials.secret_access_key == "secret123"
    assert "secret123" not in repr(credentials)


def test_credentials_named_profile(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(
        "[first]\naws_access_key_id = A1\naws_secret_access_key = S1\n"
        "[second]\naws_access_key_id = A2\naws_secret_access_key = S2\n"
    )
    credentials = Credentials.from_file(str(path), profile="second")
    assert credentials.access_key_id == "A2"

    with pytest.raises(ConfigError, match="exactly one section"):
        Credentials.from_file(str(path))
    with pytest.raises(ConfigError, match="missing"):
        Credentials.from_file(str(path), profile="missing")


def test_credentials_file_not_found(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        Credentials.from_file(str(tmp_path / "nope"))


def test_credentials_missing_secret_key(tmp_path):
    """aws_secret_access_key がなければ ConfigError"""
    path = tmp_path / "credentials"
    path.write_text("[user]\naws_access_key_id = AKIAEXAMPLE\n")
    with pytest.raises(ConfigError, match="aws_secret_access_key"):
        Credentials.from_file(str(path))


def test_credentials_malformed_file(tmp_path):
    path = tmp_path / "credentials"
    path.write_text("aws_access_key_id = no section header\n")
    with pytest.raises(ConfigError, match="Error parsing"):
        Credentials.from_file(str(path))


def test_parse_ignored_directories():
    assert parse_ignored_directories("") == frozenset()
    assert parse_ignored_directories(None) == frozenset()
    assert parse_ignored_directories(".git, node_modules") == {".git", "node_modules"}

    with pytest.raises(ArgumentError):
        parse_ignored_directories("a,,b")
    with pytest.raises(ArgumentError):
        parse_ignored_directories("a/b")


def test_upload_request_from_args():
    request = UploadRequest.from_args("/data", "bucket", "ignored,tmp")
    assert request.ignored_directories == {"ignored", "tmp"}

    with pytest.raises(ArgumentError):
        UploadRequest.from_args("/data", "  ")


def test_aws_config_defaults():
    assert AWSConfig().region == "eu-west-1"
    with pytest.raises(ConfigError):
        AWSConfig(region="")


def test_credentials_not_utf8(tmp_path):
    """UTF-8 でないファイルも ConfigError"""
    path = tmp_path / "credentials"
    path.write_bytes(b"[user]\naws_access_key_id = \xff\xfe\naws_secret_access_key = s\n")
    with pytest.raises(ConfigError, match="Error reading"):
        Credentials.from_file(str(path))
