"""
File operations and utilities

Every primitive returns a (success, error_message) pair. Filesystem errors
are caught here and never propagate to callers.
"""
import logging
import os
import shutil
import subprocess
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


class FileOperations:
    @staticmethod
    def create_directory(path):
        """Create a single new, empty directory. The parent must already exist."""
        try:
            Path(path).mkdir()
            return True, ""
        except OSError as e:
            logger.warning("create_directory failed for %s: %s", path, e)
            return False, str(e)

    @staticmethod
    def rename(old_path, new_path):
        """Rename a file or folder, refusing to replace an existing item"""
        try:
            if os.path.lexists(new_path):
                return False, f"'{os.path.basename(new_path)}' already exists in this location."
            os.rename(old_path, new_path)
            return True, ""
        except OSError as e:
            logger.warning("rename failed for %s -> %s: %s", old_path, new_path, e)
            return False, str(e)

    @staticmethod
    def delete_recursive(path):
        """Delete a file or folder. Folders are always removed with all their contents."""
        try:
            path_obj = Path(path)
            # A symlink to a directory is removed as a link, never followed
            if path_obj.is_dir() and not path_obj.is_symlink():
                shutil.rmtree(path_obj)
            else:
                path_obj.unlink()
            return True, ""
        except OSError as e:
            logger.warning("delete_recursive failed for %s: %s", path, e)
            return False, str(e)

    @staticmethod
    def copy(src, dest, overwrite=False, recursive=True):
        """Copy a file or folder to dest.

        Fails when dest exists unless overwrite is set. Without recursive a
        folder is copied as an empty folder.
        """
        try:
            src_obj = Path(src)
            dest_obj = Path(dest)
            src_is_dir = src_obj.is_dir() and not src_obj.is_symlink()

            if os.path.lexists(dest):
                if not overwrite:
                    return False, f"'{dest_obj.name}' already exists in this location."
                dest_is_dir = dest_obj.is_dir() and not dest_obj.is_symlink()
                # Symlinks and items of the other kind are removed rather than written through
                if dest_obj.is_symlink() or dest_is_dir != src_is_dir:
                    success, error = FileOperations.delete_recursive(dest)
                    if not success:
                        return False, error

            if src_is_dir:
                if recursive:
                    shutil.copytree(src_obj, dest_obj, symlinks=True, dirs_exist_ok=overwrite)
                else:
                    dest_obj.mkdir(exist_ok=overwrite)
                    shutil.copystat(src_obj, dest_obj)
            else:
                shutil.copy2(src_obj, dest_obj, follow_symlinks=False)
            return True, ""
        except OSError as e:
            # shutil.Error is an OSError subclass
            logger.warning("copy failed for %s -> %s: %s", src, dest, e)
            return False, str(e)

    @staticmethod
    def move(src, dest, overwrite=False):
        """Move a file or folder to dest.

        An existing dest is removed first when overwrite is set, since
        renaming onto an existing target fails on some platforms.
        """
        try:
            if os.path.lexists(dest):
                if not overwrite:
                    return False, f"'{os.path.basename(dest)}' already exists in this location."
                success, error = FileOperations.delete_recursive(dest)
                if not success:
                    return False, error
            # shutil.move falls back to copy + delete across filesystems
            shutil.move(src, dest)
            return True, ""
        except OSError as e:
            logger.warning("move failed for %s -> %s: %s", src, dest, e)
            return False, str(e)

    @staticmethod
    def exists(path):
        """True if anything, including a dangling symlink, is at path"""
        return os.path.lexists(path)

    @staticmethod
    def open_with_default(path):
        """Open a file with the desktop's default application"""
        try:
            file_dir = str(Path(path).parent)
            if sys.platform == 'win32':
                os.startfile(path)  # type: ignore[attr-defined]
            elif sys.platform == 'darwin':
                subprocess.run(['open', path], check=True, cwd=file_dir)
            else:
                subprocess.run(['xdg-open', path], check=True, cwd=file_dir)
            return True, ""
        except (subprocess.CalledProcessError, FileNotFoundError, OSError) as e:
            logger.warning("open_with_default failed for %s: %s", path, e)
            return False, str(e)

    @staticmethod
    def format_size(size):
        """Format file size in human readable format"""
        for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
            if size < 1024.0:
                return f"{size:.1f} {unit}"
            size /= 1024.0
        return f"{size:.1f} PB"
