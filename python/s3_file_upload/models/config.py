"""設定管理用のデータクラス"""
from dataclasses import dataclass, field
from typing import FrozenSet, Optional
import configparser
import os

from ..errors import ArgumentError, ConfigError


DEFAULT_CREDENTIALS_FILE = "credentials"
DEFAULT_REGION = "eu-west-1"

ACCESS_KEY_ID = "aws_access_key_id"
SECRET_ACCESS_KEY = "aws_secret_access_key"


@dataclass
class LoggingConfig:
    """ロギング設定"""
    level: str = "INFO"
    format: str = "%(asctime)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class AWSConfig:
    """AWS関連の設定"""
    region: str = DEFAULT_REGION
    endpoint_url: Optional[str] = None

    def __post_init__(self):
        if not self.region or not self.region.strip():
            raise ConfigError("region cannot be empty")


@dataclass
class UploadOptions:
    """アップロードオプション"""
    acl: Optional[str] = None
    dry_run: bool = False


@dataclass(frozen=True)
class Credentials:
    """アクセスキーとシークレットキー"""
    access_key_id: str
    secret_access_key: str = field(repr=False)

    @classmethod
    def from_file(cls, path: str = DEFAULT_CREDENTIALS_FILE,
                  profile: Optional[str] = None) -> 'Credentials':
        """認証情報ファイルから読み込み

        profile を省略した場合、ファイルにはセクションがちょうど1つ必要。
        """
        if not os.path.isfile(path):
            raise ConfigError(f"Credentials file {path} not found.")

        parser = configparser.ConfigParser(interpolation=None)
        try:
            with open(path, "r", encoding="utf-8") as file:
                parser.read_file(file)
        except configparser.Error as e:
            raise ConfigError(f"Error parsing credentials file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Error reading credentials file {path}: {e}") from e

        sections = parser.sections()
        if profile is None:
            if len(sections) != 1:
                raise ConfigError(
                    f"Credentials file {path} must contain exactly one section "
                    f"when no profile is given, found {len(sections)}"
                )
            profile = sections[0]
        elif not parser.has_section(profile):
            raise ConfigError(f"Section [{profile}] not found in {path}")

        values = {}
        for key in (ACCESS_KEY_ID, SECRET_ACCESS_KEY):
            value = parser.get(profile, key, fallback="").strip()
            if not value:
                raise ConfigError(f"Missing key {key} in section [{profile}] of {path}")
            values[key] = value

        return cls(
            access_key_id=values[ACCESS_KEY_ID],
            secret_access_key=values[SECRET_ACCESS_KEY],
        )


def parse_ignored_directories(value: Optional[str]) -> FrozenSet[str]:
    """カンマ区切りのディレクトリ名をパース"""
    if value is None or not value.strip():
        return frozenset()

    names = set()
    for raw in value.split(","):
        name = raw.strip()
        if not name:
            raise ArgumentError(f"Empty directory name in --ignored_directories: {value!r}")
        if "/" in name or os.sep in name:
            raise ArgumentError(
                f"Ignored directory names must be single path components, got {name!r}"
            )
        names.add(name)
    return frozenset(names)


@dataclass(frozen=True)
class UploadRequest:
    """1回の実行で扱うアップロード要求"""
    local_root: str
    bucket_name: str
    ignored_directories: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if not self.local_root:
            raise ArgumentError("LOCAL_PATH cannot be empty")
        if not self.bucket_name or not self.bucket_name.strip():
            raise ArgumentError("BUCKET_NAME cannot be empty")

    @classmethod
    def from_args(cls, local_root: str, bucket_name: str,
                  ignored_directories: Optional[str] = None) -> 'UploadRequest':
        return cls(
            local_root=local_root,
            bucket_name=bucket_name,
            ignored_directories=parse_ignored_directories(ignored_directories),
        )
