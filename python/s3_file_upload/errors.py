"""アップロード処理で使用する例外"""
from typing import Optional


class UploadToolError(Exception):
    """s3_file_upload の例外の基底クラス"""


class ConfigError(UploadToolError):
    """認証情報ファイルが存在しない、または不正"""


class ArgumentError(UploadToolError):
    """コマンドライン引数が不正"""


class TraversalError(UploadToolError, OSError):
    """ディレクトリ走査中の読み込み失敗（ディレクトリまたはファイル）"""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")

    def __str__(self) -> str:
        return f"Cannot read {self.path}: {self.reason}"


class UploadError(UploadToolError):
    """ファイルのアップロード失敗"""

    def __init__(self, path: str, cause: Optional[BaseException] = None):
        self.path = path
        self.cause = cause
        message = f"Failed to upload {path}"
        if cause is not None:
            message = f"{message}: {cause}"
        super().__init__(message)
