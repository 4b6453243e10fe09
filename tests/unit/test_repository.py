# Unit tests for utils/repository.py

import pytest
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', 'gitinternals-project'))

from utils import repository, config


class TestFindGitDir:
    # Tests for repository.find_git_dir()

    def test_finds_git_dir_from_work_tree(self, git_dir, temp_dir):
        # Should find .git when given the work tree root
        result = repository.find_git_dir(temp_dir)
        assert result == git_dir

    def test_accepts_git_dir_itself(self, git_dir):
        assert repository.find_git_dir(git_dir) == git_dir

    def test_finds_git_dir_in_subdirectory(self, git_dir, temp_dir):
        # Should find .git when in a subdirectory
        subdir = os.path.join(temp_dir, 'src', 'deep', 'nested')
        os.makedirs(subdir)
        os.chdir(subdir)

        result = repository.find_git_dir()
        # Use realpath to resolve symlinks
        assert os.path.realpath(result) == os.path.realpath(git_dir)

    def test_returns_none_when_not_in_repo(self, temp_dir):
        # Should return None when not in a repository
        result = repository.find_git_dir(temp_dir)
        assert result is None


class TestLocateGitDir:
    # Tests for repository.locate_git_dir()

    def test_explicit_work_tree(self, git_dir, temp_dir):
        assert repository.locate_git_dir(temp_dir) == git_dir

    def test_explicit_path_that_is_not_a_repo(self, temp_dir):
        assert repository.locate_git_dir(temp_dir) is None

    def test_falls_back_to_config(self, git_dir):
        config.write_config('core.git_dir', git_dir)
        assert repository.locate_git_dir() == git_dir


class TestGetCurrentBranch:
    # Tests for repository.get_current_branch()

    def test_returns_branch_name(self, git_dir):
        # Should return current branch name
        assert repository.get_current_branch(git_dir) == 'master'

    def test_returns_none_when_detached(self, repo_with_commit):
        # Should return None when HEAD is detached
        git_dir, commit_hash = repo_with_commit

        # Detach HEAD
        with open(os.path.join(git_dir, 'HEAD'), 'w') as f:
            f.write(commit_hash)

        assert repository.get_current_branch(git_dir) is None

    def test_nested_branch_name(self, git_dir):
        with open(os.path.join(git_dir, 'HEAD'), 'w') as f:
            f.write('ref: refs/heads/feature/login\n')
        assert repository.get_current_branch(git_dir) == 'feature/login'


class TestGetHeadCommit:
    # Tests for repository.get_head_commit()

    def test_returns_none_for_empty_repo(self, git_dir):
        # Should return None when no commits exist
        assert repository.get_head_commit(git_dir) is None

    def test_returns_commit_hash(self, repo_with_commit):
        git_dir, commit_hash = repo_with_commit
        assert repository.get_head_commit(git_dir) == commit_hash

    def test_handles_detached_head(self, repo_with_commit):
        # Should return hash when HEAD is detached
        git_dir, commit_hash = repo_with_commit
        with open(os.path.join(git_dir, 'HEAD'), 'w') as f:
            f.write(commit_hash)
        assert repository.get_head_commit(git_dir) == commit_hash


class TestGetAllBranches:
    # Tests for repository.get_all_branches()

    def test_lists_all_branches_sorted(self, merge_history):
        git_dir, _ = merge_history
        assert repository.get_all_branches(git_dir) == ['feature', 'master']

    def test_includes_nested_branches(self, store):
        tree = store.tree([])
        sha = store.commit(tree)
        store.set_branch('master', sha)
        store.set_branch('feature/login', sha)
        assert repository.get_all_branches(store.git_dir) == ['feature/login', 'master']

    def test_no_refs_directory(self, temp_dir):
        assert repository.get_all_branches(temp_dir) == []


class TestResolveRevision:
    # Tests for repository.resolve_revision()

    def test_branch_name(self, merge_history):
        git_dir, commits = merge_history
        assert repository.resolve_revision(git_dir, 'feature') == commits['feature1']

    def test_head(self, merge_history):
        git_dir, commits = merge_history
        assert repository.resolve_revision(git_dir, 'HEAD') == commits['merge']

    def test_full_hash_passes_through(self, git_dir):
        assert repository.resolve_revision(git_dir, 'A' * 40) == 'a' * 40

    def test_unknown_name(self, git_dir):
        assert repository.resolve_revision(git_dir, 'no-such-branch') is None

    def test_missing_branch_commit(self, git_dir):
        assert repository.get_branch_commit(git_dir, 'master') is None
