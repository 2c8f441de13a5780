"""テスト共通フィクスチャ"""
import pytest

from s3_file_upload.utils.logger import LoggerManager


@pytest.fixture(autouse=True)
def reset_logger():
    LoggerManager.reset()
    yield
    LoggerManager.reset()


@pytest.fixture
def make_tree(tmp_path):
    """{相対パス: 内容} からファイルツリーを作成"""
    def _make(files, root_name="root"):
        root = tmp_path / root_name
        root.mkdir()
        for rel, content in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content if isinstance(content, bytes) else content.encode())
        return root
    return _make


@pytest.fixture
def credentials_file(tmp_path):
    path = tmp_path / "credentials"
    path.write_text(
        "[user]\n"
        "aws_access_key_id = AKIAEXAMPLE\n"
        "aws_secret_access_key = secret123\n"
    )
    return path
