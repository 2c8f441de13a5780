"""s3_file_upload パッケージ"""
from typing import Optional
from .errors import (
    ArgumentError,
    ConfigError,
    TraversalError,
    UploadError,
    UploadToolError,
)
from .models.config import (
    AWSConfig,
    Credentials,
    DEFAULT_CREDENTIALS_FILE,
    LoggingConfig,
    UploadOptions,
    UploadRequest,
)
from .utils.logger import LoggerManager
from .core.task_runner import ConfirmCallback, TaskRunner, UploadSummary


class S3FileUploader:
    """ディレクトリをS3バケットにアップロードするメインクラス"""

    def __init__(self, request: UploadRequest,
                 credentials_path: str = DEFAULT_CREDENTIALS_FILE,
                 profile: Optional[str] = None,
                 aws_config: Optional[AWSConfig] = None,
                 options: Optional[UploadOptions] = None,
                 logging_config: Optional[LoggingConfig] = None):
        self.logger = LoggerManager.setup(logging_config or LoggingConfig())
        self.request = request

        # 走査より先に認証情報を読み込む
        self.credentials = Credentials.from_file(credentials_path, profile)
        self.logger.info(f"Credentials loaded from {credentials_path}")

        self.task_runner = TaskRunner(aws_config, options)

    def run(self, confirm: Optional[ConfirmCallback] = None) -> UploadSummary:
        """アップロードを実行"""
        self.logger.info(
            f"Starting upload of {self.request.local_root} to {self.request.bucket_name}..."
        )
        return self.task_runner.run(self.request, self.credentials, confirm)


__all__ = [
    'S3FileUploader',
    'UploadRequest',
    'Credentials',
    'UploadSummary',
    'UploadToolError',
    'ConfigError',
    'ArgumentError',
    'TraversalError',
    'UploadError',
]
