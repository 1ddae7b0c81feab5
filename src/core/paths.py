"""
Path helpers shared by the controller and the directory listing
"""
import os


def join_path(directory: str, name: str) -> str:
    """Join a directory and an entry name with exactly one separator."""
    base = directory.rstrip(os.sep)
    if not base:
        # Filesystem root
        return os.sep + name
    return base + os.sep + name


def normalize_path(path: str, base_dir: str = None) -> str:
    """Expand '~', anchor relative input at base_dir and collapse '..' parts"""
    expanded = os.path.expanduser(path)
    if not os.path.isabs(expanded):
        expanded = os.path.join(base_dir or os.getcwd(), expanded)
    return os.path.normpath(os.path.abspath(expanded))


def is_valid_entry_name(name: str) -> bool:
    """A name the user typed must stay inside the current directory"""
    if not name or name in ('.', '..'):
        return False
    if os.sep in name:
        return False
    if os.altsep and os.altsep in name:
        return False
    return True


def is_same_or_inside(path: str, ancestor: str) -> bool:
    """True if path equals ancestor or lies somewhere beneath it."""
    path = os.path.normpath(os.path.abspath(path))
    ancestor = os.path.normpath(os.path.abspath(ancestor))
    if path == ancestor:
        return True
    return path.startswith(ancestor.rstrip(os.sep) + os.sep)
