"""s3_file_upload コアモジュール"""
from .s3_client import S3ClientManager
from .uploader import UploadExecutor
from .task_runner import TaskRunner, UploadSummary

__all__ = [
    'S3ClientManager',
    'UploadExecutor',
    'TaskRunner',
    'UploadSummary'
]
