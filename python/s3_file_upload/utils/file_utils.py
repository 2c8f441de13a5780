"""ファイル操作関連のユーティリティ"""
import hashlib
import mimetypes
import os
from typing import Iterable, Iterator, Optional
from dataclasses import dataclass

from ..errors import TraversalError
from ..models.config import parse_ignored_directories
from .logger import LoggerManager


DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FileEntry:
    """アップロード対象ファイル"""
    path: str
    relative_key: str
    size: int


class ExclusionFilter:
    """ディレクトリ名による除外判定"""

    def __init__(self, names: Optional[Iterable[str]] = None):
        self.names = frozenset(names or ())

    @classmethod
    def from_option(cls, value: Optional[str]) -> 'ExclusionFilter':
        """--ignored_directories の値から作成"""
        return cls(parse_ignored_directories(value))

    def is_excluded(self, directory_name: str) -> bool:
        """ディレクトリ名が除外対象か（完全一致、大文字小文字を区別）"""
        return directory_name in self.names


def to_relative_key(path: str, root: str) -> str:
    """ルートからの相対パスを "/" 区切りのキーに変換"""
    return os.path.relpath(path, root).replace(os.sep, "/")


class TreeWalker:
    """ディレクトリを深さ優先で走査してファイルを列挙"""

    def __init__(self, exclusion_filter: Optional[ExclusionFilter] = None):
        self.exclusion_filter = exclusion_filter or ExclusionFilter()
        self.logger = LoggerManager.get_logger()

    def walk(self, root: str) -> Iterator[FileEntry]:
        """root 以下の通常ファイルを FileEntry として生成

        除外対象のディレクトリには降りない。シンボリックリンクはディレクトリとして
        辿らない。読めないディレクトリがあれば TraversalError を送出する。
        """
        if not os.path.isdir(root):
            raise TraversalError(root, "not a directory")

        for current, dirs, files in os.walk(root, onerror=self._raise_error):
            kept = []
            for d in dirs:
                dir_path = os.path.join(current, d)
                if self.exclusion_filter.is_excluded(d):
                    self.logger.debug(f"Skipping ignored directory: {dir_path}")
                elif os.path.islink(dir_path):
                    self.logger.debug(f"Not following symlinked directory: {dir_path}")
                else:
                    kept.append(d)
            dirs[:] = kept

            for file in files:
                file_path = os.path.join(current, file)
                try:
                    size = os.path.getsize(file_path)
                except OSError as e:
                    raise TraversalError(file_path, e.strerror or str(e)) from e
                yield FileEntry(
                    path=os.path.abspath(file_path),
                    relative_key=to_relative_key(file_path, root),
                    size=size
                )

    @staticmethod
    def _raise_error(error: OSError):
        raise TraversalError(error.filename or "<unknown>", error.strerror or str(error)) from error


def guess_content_type(path: str) -> str:
    """拡張子から Content-Type を推定"""
    content_type, _ = mimetypes.guess_type(path)
    return content_type or DEFAULT_CONTENT_TYPE


def calculate_md5(path: str) -> str:
    """ファイルのMD5を計算"""
    hash_md5 = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(65536), b""):
            hash_md5.update(chunk)
    return hash_md5.hexdigest()
