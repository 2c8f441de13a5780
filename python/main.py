#!/usr/bin/env python3
"""s3-file-upload エントリーポイント"""
import sys

from s3_file_upload.cli import main


if __name__ == "__main__":
    sys.exit(main())
