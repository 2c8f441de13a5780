"""アップロードタスクの実行"""
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..models.config import AWSConfig, Credentials, UploadOptions, UploadRequest
from ..utils.logger import LoggerManager
from ..utils.file_utils import ExclusionFilter, FileEntry, TreeWalker
from .uploader import UploadExecutor
from .s3_client import S3ClientManager


ConfirmCallback = Callable[[List[FileEntry]], bool]


@dataclass
class UploadSummary:
    """アップロード結果のまとめ"""
    uploaded: List[str] = field(default_factory=list)
    total_bytes: int = 0
    cancelled: bool = False
    dry_run: bool = False


class TaskRunner:
    """ディレクトリ走査とアップロードをまとめて実行"""

    def __init__(self, aws_config: Optional[AWSConfig] = None,
                 options: Optional[UploadOptions] = None,
                 s3_client=None):
        self.aws_config = aws_config or AWSConfig()
        self.options = options or UploadOptions()
        self.logger = LoggerManager.get_logger()
        self._s3_client = s3_client

    def collect_files(self, request: UploadRequest) -> List[FileEntry]:
        """アップロード対象を全て列挙（走査が失敗したら何もアップロードしない）"""
        walker = TreeWalker(ExclusionFilter(request.ignored_directories))
        entries = list(walker.walk(request.local_root))
        self.logger.info(f"Found {len(entries)} files under {request.local_root}")
        return entries

    def run(self, request: UploadRequest, credentials: Credentials,
            confirm: Optional[ConfirmCallback] = None) -> UploadSummary:
        """全ファイルを順番にアップロード

        最初の失敗で UploadError を送出する。confirm が False を返した場合は
        何もアップロードせずに cancelled=True を返す。
        """
        summary = UploadSummary(dry_run=self.options.dry_run)
        entries = self.collect_files(request)

        if not entries:
            self.logger.warning(f"No files found in {request.local_root}")
            return summary

        if confirm is not None and not confirm(entries):
            self.logger.info("Upload cancelled")
            summary.cancelled = True
            return summary

        executor = UploadExecutor(self._get_client(credentials), self.options)
        total = len(entries)
        for i, entry in enumerate(entries, 1):
            self.logger.debug(f"File {i}/{total}: {entry.relative_key}")
            summary.total_bytes += executor.upload_file(entry, request.bucket_name)
            summary.uploaded.append(entry.relative_key)

        self.logger.info(
            f"Upload completed: {len(summary.uploaded)} files, {summary.total_bytes} bytes "
            f"to {request.bucket_name}"
        )
        return summary

    def _get_client(self, credentials: Credentials):
        if self._s3_client is None:
            self._s3_client = S3ClientManager(self.aws_config, credentials).get_client()
        return self._s3_client
