# Shared pytest fixtures for gitinternals tests

import pytest
import os
import sys
import shutil
import tempfile
import hashlib
import zlib

# Add gitinternals-project to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'gitinternals-project'))


class ObjectWriter:
    # Writes loose objects the way git does, so the reader has something real to decode.
    # Test-only: the tool itself never writes objects.

    def __init__(self, git_dir):
        self.git_dir = git_dir

    def write_raw(self, data, sha=None):
        # Stores already-encoded "<kind> <len>\0<body>" bytes; the hash defaults to sha1(data)
        sha = sha or hashlib.sha1(data).hexdigest()
        object_dir = os.path.join(self.git_dir, 'objects', sha[:2])
        os.makedirs(object_dir, exist_ok=True)
        with open(os.path.join(object_dir, sha[2:]), 'wb') as f:
            f.write(zlib.compress(data))
        return sha

    def write(self, kind, body):
        return self.write_raw(f'{kind} {len(body)}\0'.encode() + body)

    def blob(self, content):
        if isinstance(content, str):
            content = content.encode()
        return self.write('blob', content)

    def tree(self, entries):
        # entries: list of (mode, name, hex_sha), kept in the given order
        body = b''.join(
            mode.encode() + b' ' + name.encode() + b'\0' + bytes.fromhex(sha)
            for mode, name, sha in entries
        )
        return self.write('tree', body)

    def commit(self, tree, parents=(), message='Initial commit', name='Tester',
               email='tester@example.com', epoch=1600000000, offset='+0300',
               committer=None, extra_headers=()):
        committer = committer or (name, email, epoch, offset)
        lines = [f'tree {tree}']
        lines += [f'parent {parent}' for parent in parents]
        lines.append(f'author {name} <{email}> {epoch} {offset}')
        lines.append('committer {} <{}> {} {}'.format(*committer))
        lines += list(extra_headers)
        lines.append('')
        body = '\n'.join(lines) + '\n' + message + '\n'
        return self.write('commit', body.encode())

    def set_branch(self, branch_name, sha):
        branch_path = os.path.join(self.git_dir, 'refs', 'heads', *branch_name.split('/'))
        os.makedirs(os.path.dirname(branch_path), exist_ok=True)
        with open(branch_path, 'w') as f:
            f.write(f"{sha}\n")


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    # Keeps tests away from the user's ~/.gitinternals
    config_path = os.path.join(str(tmp_path), 'gitinternals.ini')
    monkeypatch.setenv('GITINTERNALS_CONFIG', config_path)
    return config_path


@pytest.fixture
def temp_dir():
    # Creates a temporary directory that is cleaned up after the test
    # Also saves/restores cwd to prevent issues when tests change directories
    original_dir = os.getcwd()
    tmp = tempfile.mkdtemp()
    yield tmp
    os.chdir(original_dir)
    shutil.rmtree(tmp, ignore_errors=True)


@pytest.fixture
def git_dir(temp_dir):
    # Creates an empty .git skeleton (objects/, refs/heads/, HEAD on master)
    path = os.path.join(temp_dir, '.git')
    os.makedirs(os.path.join(path, 'objects'))
    os.makedirs(os.path.join(path, 'refs', 'heads'))
    with open(os.path.join(path, 'HEAD'), 'w') as f:
        f.write('ref: refs/heads/master\n')
    return path


@pytest.fixture
def store(git_dir):
    return ObjectWriter(git_dir)


@pytest.fixture
def repo_with_commit(store):
    # One root commit on master: README.md and src/main.py
    readme = store.blob('# Test Project\n')
    main_py = store.blob('print("hi")\n')
    src = store.tree([('100644', 'main.py', main_py)])
    root_tree = store.tree([('100644', 'README.md', readme), ('40000', 'src', src)])
    commit_hash = store.commit(root_tree, message='Initial commit')
    store.set_branch('master', commit_hash)
    return store.git_dir, commit_hash


@pytest.fixture
def merge_history(store):
    # base <- main1 <- merge(main1, feature1) on master, feature1 <- base on feature
    tree = store.tree([('100644', 'a.txt', store.blob('a\n'))])
    base = store.commit(tree, message='base', epoch=1600000000)
    main1 = store.commit(tree, parents=[base], message='main work', epoch=1600000100)
    feature1 = store.commit(tree, parents=[base], message='feature work', epoch=1600000200)
    merge = store.commit(tree, parents=[main1, feature1], message="Merge branch 'feature'", epoch=1600000300)
    store.set_branch('master', merge)
    store.set_branch('feature', feature1)
    return store.git_dir, {'base': base, 'main1': main1, 'feature1': feature1, 'merge': merge}


# Mock args object for command functions
class MockArgs:
    def __init__(self, **kwargs):
        for key, value in kwargs.items():
            setattr(self, key, value)
