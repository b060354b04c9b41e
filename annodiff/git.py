"""
Baseline provider, reads the last committed version of a file from git.

The `git` command line tool is used directly, nothing is written to the
repository.
"""

import os
import subprocess

from loguru import logger

GIT_TIMEOUT = 30


class BaselineUnavailable(Exception):
    """No baseline could be read for this file."""
    reason = 'Baseline unavailable'

    def __init__(self, path, msg=''):
        self.path = path
        self.msg = msg or self.reason
        super().__init__(f"{self.msg}: {path}")


class NotARepository(BaselineUnavailable):
    reason = 'Not a git repository'


class NotTracked(BaselineUnavailable):
    reason = 'File is not tracked'


class NotInHead(BaselineUnavailable):
    reason = 'File does not exist in HEAD'


def _resolve(path):
    # Resolve symlinks, git reports the real location of the work tree
    return os.path.realpath(os.path.abspath(path))


def _git(args, cwd, text=True):
    return subprocess.run(['git', *args], cwd=cwd, capture_output=True, text=text, timeout=GIT_TIMEOUT)


def _work_tree(abs_path):
    """Return the top level directory of the repository holding abs_path, or None."""
    directory = abs_path if os.path.isdir(abs_path) else os.path.dirname(abs_path)
    try:
        proc = _git(['rev-parse', '--show-toplevel'], cwd=directory)
    except (FileNotFoundError, NotADirectoryError) as e:
        logger.debug(f"Could not run git in '{directory}': {e}")
        return None
    if proc.returncode != 0:
        return None
    return proc.stdout.strip() or None


def _relative_to_work_tree(abs_path, work_tree):
    # git wants forward slashes in tree paths, also on Windows
    return os.path.relpath(abs_path, _resolve(work_tree)).replace(os.sep, '/')


def is_git_available(path: str) -> bool:
    """Check if a file is inside a git repository."""
    return _work_tree(_resolve(path)) is not None


def is_file_tracked(path: str) -> bool:
    """Check if a file is tracked in the git repository (not new/untracked)."""
    abs_path = _resolve(path)
    work_tree = _work_tree(abs_path)
    if not work_tree:
        return False

    proc = _git(['ls-files', '--error-unmatch', '--', _relative_to_work_tree(abs_path, work_tree)], cwd=work_tree)
    return proc.returncode == 0


def get_head_content(path: str) -> str:
    """
    Get the content of a file as of the HEAD commit.

    Raises:
        NotARepository: The file is not inside a git work tree
        NotTracked: The file is untracked (a new file)
        NotInHead: The file is tracked but was never committed, or the repository has no commits yet
        BaselineUnavailable: The committed content is not valid UTF-8 text
    """
    abs_path = _resolve(path)
    work_tree = _work_tree(abs_path)
    if not work_tree:
        raise NotARepository(path)

    relative_path = _relative_to_work_tree(abs_path, work_tree)

    if not is_file_tracked(abs_path):
        raise NotTracked(path)

    proc = _git(['show', f"HEAD:{relative_path}"], cwd=work_tree, text=False)
    if proc.returncode != 0:
        logger.debug(f"git show HEAD:{relative_path} failed - {proc.stderr.decode('utf-8', errors='replace').strip()}")
        raise NotInHead(path)

    try:
        content = proc.stdout.decode('utf-8')
    except UnicodeDecodeError:
        raise BaselineUnavailable(path, msg='HEAD content is not valid UTF-8')

    logger.trace(f"Read {len(content)} characters of HEAD content for '{relative_path}'")
    return content
