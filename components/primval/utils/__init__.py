from primval.utils.core import clamp, path_join, rmdir_recursive

__all__ = ["clamp", "path_join", "rmdir_recursive"]
