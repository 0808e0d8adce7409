"""Splitting file paths that use backslash or slash separators."""

from __future__ import annotations

from dataclasses import dataclass

from trafficmon.textutil import string_transform


def _last_separator(path: str) -> int:
    index = path.rfind("\\")
    return index if index >= 0 else path.rfind("/")


@dataclass
class FilePath:
    """A file path with helpers to take it apart and change its extension."""

    path: str = ""

    def file_extension(self, upper: bool = False, with_dot: bool = False) -> str:
        """Extension after the last dot, in lower or upper ASCII case."""
        index = self.path.rfind(".")
        if index < 0 or index == len(self.path) - 1:
            return ""
        extension = self.path[index if with_dot else index + 1:]
        return string_transform(extension, upper)

    def file_name(self) -> str:
        """Last path component."""
        return self.path[_last_separator(self.path) + 1:]

    def file_name_without_extension(self) -> str:
        """Last path component without its extension."""
        dot = self.path.rfind(".")
        start = _last_separator(self.path) + 1
        if dot >= start:
            return self.path[start:dot]
        return self.path[start:]

    def folder_name(self) -> str:
        """Name of the directory holding the file, or an empty string."""
        index = max(self.path.rfind("\\"), self.path.rfind("/"))
        if index <= 0:
            return ""
        head = self.path[:index]
        parent = max(head.rfind("\\"), head.rfind("/"))
        if parent <= 0:
            return ""
        return self.path[parent + 1:index]

    def dir(self) -> str:
        """Directory part including the trailing separator."""
        if self.path.endswith(("\\", "/")):
            return self.path
        return self.path[:_last_separator(self.path) + 1]

    def parent_dir(self) -> str:
        """Directory above the one holding the file, with trailing separator."""
        directory = self.dir()
        if directory.endswith(("\\", "/")):
            directory = directory[:-1]
        return self.path[:_last_separator(directory) + 1]

    def replace_extension(self, new_extension: str | None) -> str:
        """Replace (or add, or remove) the extension and return the new path."""
        path = self.path
        dot = path.rfind(".")
        backslash = path.rfind("\\")
        if dot < 0 or (backslash >= 0 and dot < backslash):
            path += "."
        elif dot != len(path) - 1:
            path = path[:dot + 1]
        if new_extension:
            path += new_extension
        elif path.endswith("."):
            path = path[:-1]
        self.path = path
        return path

    def path_without_extension(self) -> str:
        """Full path with everything from the last dot removed."""
        index = self.path.rfind(".")
        return self.path if index < 0 else self.path[:index]