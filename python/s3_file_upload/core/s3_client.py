"""S3クライアント管理"""
import boto3
from typing import Optional
from botocore.exceptions import BotoCoreError
from ..errors import ConfigError
from ..models.config import AWSConfig, Credentials
from ..utils.logger import LoggerManager


class S3ClientManager:
    """S3クライアントの作成と管理"""

    def __init__(self, aws_config: AWSConfig, credentials: Credentials):
        self.aws_config = aws_config
        self.credentials = credentials
        self.logger = LoggerManager.get_logger()
        self._client = None

    def get_client(self):
        """S3クライアントを取得（必要に応じて作成）"""
        if self._client is None:
            self._client = self._create_client()
        return self._client

    def _create_client(self):
        """認証情報ファイルのキーでS3クライアントを作成"""
        client_kwargs = {
            'region_name': self.aws_config.region,
            'aws_access_key_id': self.credentials.access_key_id,
            'aws_secret_access_key': self.credentials.secret_access_key,
        }
        endpoint_url: Optional[str] = self.aws_config.endpoint_url
        if endpoint_url:
            client_kwargs['endpoint_url'] = endpoint_url

        try:
            s3_client = boto3.client('s3', **client_kwargs)
        except (BotoCoreError, ValueError) as e:
            self.logger.error(f"Error creating S3 client: {e}")
            raise ConfigError(f"Error creating S3 client: {e}") from e

        self.logger.info(f"S3 client created for region {self.aws_config.region}.")
        return s3_client
