"""S3アップロード実行クラス"""
from botocore.exceptions import BotoCoreError, ClientError

from ..errors import UploadError
from ..models.config import UploadOptions
from ..utils.logger import LoggerManager
from ..utils.file_utils import FileEntry, guess_content_type


class UploadExecutor:
    """ファイルアップロードの実行"""

    def __init__(self, s3_client, options: UploadOptions):
        self.s3_client = s3_client
        self.options = options
        self.logger = LoggerManager.get_logger()

    def upload_file(self, entry: FileEntry, bucket: str) -> int:
        """単一ファイルをアップロードし、送信したバイト数を返す

        失敗した場合は UploadError を送出する（リトライしない）。
        """
        s3_key = entry.relative_key
        self.logger.info(f'Uploading "{entry.path}" to "{bucket}/{s3_key}"')

        if self.options.dry_run:
            self.logger.info(f"[DRY RUN]: Would upload {entry.path} to {bucket}/{s3_key}")
            return 0

        try:
            with open(entry.path, "rb") as f:
                body = f.read()
        except OSError as e:
            self.logger.error(f"Cannot read file {entry.path}: {e}")
            raise UploadError(entry.path, e) from e

        params = {
            'Bucket': bucket,
            'Key': s3_key,
            'Body': body,
            'ContentType': guess_content_type(entry.path),
        }
        if self.options.acl:
            params['ACL'] = self.options.acl

        try:
            self.s3_client.put_object(**params)
        except (ClientError, BotoCoreError) as e:
            self.logger.error(f"AWS error uploading {entry.path}: {e}")
            raise UploadError(entry.path, e) from e

        self.logger.info(f"Successfully uploaded {entry.path} to {bucket}/{s3_key}")
        return len(body)
