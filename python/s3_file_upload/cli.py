"""コマンドラインインターフェース"""
import argparse
import sys
from typing import Callable, List, Optional

from . import S3FileUploader
from .errors import UploadToolError
from .models.config import (
    AWSConfig,
    DEFAULT_CREDENTIALS_FILE,
    DEFAULT_REGION,
    LoggingConfig,
    UploadOptions,
    UploadRequest,
)
from .utils.file_utils import FileEntry, calculate_md5


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="s3-file-upload",
        description="Recursively upload a local directory to an S3 bucket",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  s3-file-upload ./site my-bucket
  s3-file-upload ./site my-bucket --ignored_directories=.git,node_modules
  s3-file-upload ./site my-bucket --acl public-read --yes
        """
    )

    parser.add_argument('local_path', metavar='LOCAL_PATH', help='Local directory to upload')
    parser.add_argument('bucket_name', metavar='BUCKET_NAME', help='Target S3 bucket')
    parser.add_argument('--ignored_directories', '--ignored-directories', default='',
                        help='Comma-separated directory names to skip')
    parser.add_argument('--credentials', default=DEFAULT_CREDENTIALS_FILE,
                        help='Credentials file (default: ./credentials)')
    parser.add_argument('--profile', help='Section of the credentials file to use')
    parser.add_argument('--region', default=DEFAULT_REGION, help='AWS region')
    parser.add_argument('--endpoint-url', help='S3-compatible endpoint URL')
    parser.add_argument('--acl', help='Canned ACL for uploaded objects, e.g. public-read')
    parser.add_argument('--dry-run', action='store_true',
                        help='Show what would be uploaded without uploading')
    parser.add_argument('--yes', '-y', action='store_true', help='Do not ask for confirmation')
    parser.add_argument('--log-level', default='INFO', help='Logging level')
    parser.add_argument('--log-file', help='Also write logs to this file')
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def confirm_upload(entries: List[FileEntry],
                   input_func: Optional[Callable[[str], str]] = None) -> bool:
    """アップロード対象を表示して確認を求める"""
    input_func = input_func or input
    print("\nFiles found to be uploaded:\n")
    for entry in entries:
        print(f"{entry.path} [{calculate_md5(entry.path)}]")

    while True:
        try:
            answer = input_func("\nConfirm upload? <y/N> ").strip().lower()
        except EOFError:
            return False
        if answer in ("", "n", "no"):
            return False
        if answer in ("y", "yes"):
            return True


def main(argv: Optional[List[str]] = None) -> int:
    """メイン関数"""
    args = parse_args(argv)

    try:
        request = UploadRequest.from_args(
            args.local_path, args.bucket_name, args.ignored_directories
        )
        uploader = S3FileUploader(
            request,
            credentials_path=args.credentials,
            profile=args.profile,
            aws_config=AWSConfig(region=args.region, endpoint_url=args.endpoint_url),
            options=UploadOptions(acl=args.acl, dry_run=args.dry_run),
            logging_config=LoggingConfig(level=args.log_level, file=args.log_file),
        )
        summary = uploader.run(confirm=None if args.yes else confirm_upload)
    except (UploadToolError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130

    if summary.cancelled:
        print("Upload cancelled")
    return 0


if __name__ == "__main__":
    sys.exit(main())
