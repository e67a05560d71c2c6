import os
import pytest

from core.errors import AccessDeniedError
from core.path_resolver import is_within_root, relative_to_root, resolve_path

@pytest.mark.unit
class TestResolvePath:

    def test_absent_path_is_root(self, root):
        assert resolve_path(root, None) == root
        assert resolve_path(root, "") == root

    def test_relative_path_is_joined(self, root):
        assert resolve_path(root, "docs/a.txt") == os.path.join(root, "docs", "a.txt")

    def test_dot_segments_are_normalized(self, root):
        assert resolve_path(root, "./docs/../a.txt") == os.path.join(root, "a.txt")
        assert resolve_path(root, "docs/..") == root

    def test_path_traversal_variations(self, root):
        """Test various path traversal attack patterns."""
        attack_patterns = [
            "../../../etc/passwd",
            "foo/../../etc/passwd",
            "./../../etc/passwd",
            "..",
            "docs/../../outside.txt",
        ]

        for pattern in attack_patterns:
            with pytest.raises(AccessDeniedError):
                resolve_path(root, pattern)

    def test_absolute_path_outside_root_rejected(self, root):
        with pytest.raises(AccessDeniedError):
            resolve_path(root, "/etc/passwd")

    def test_absolute_path_inside_root_accepted(self, root):
        inside = os.path.join(root, "docs", "a.txt")
        assert resolve_path(root, inside) == inside

    def test_sibling_with_common_prefix_rejected(self, root):
        sibling = "../" + os.path.basename(root) + "2/secret.txt"
        with pytest.raises(AccessDeniedError, match="outside the storage directory"):
            resolve_path(root, sibling)

    def test_backslashes_stay_inside_root(self, root):
        # On POSIX a backslash is an ordinary filename character.
        if os.sep == "\\":
            pytest.skip("POSIX-only behaviour")
        resolved = resolve_path(root, "..\\..\\windows\\system32")
        assert is_within_root(root, resolved)

    def test_does_not_touch_filesystem(self, root):
        resolved = resolve_path(root, "missing/dir/file.txt")
        assert not os.path.exists(resolved)


@pytest.mark.unit
def test_is_within_root_handles_trailing_separator():
    assert is_within_root("/srv/storage/", "/srv/storage/a")
    assert is_within_root("/srv/storage", "/srv/storage")
    assert not is_within_root("/srv/storage", "/srv/storage-other/a")


@pytest.mark.unit
def test_relative_to_root(root):
    assert relative_to_root(root, os.path.join(root, "docs", "a.txt")) == os.path.join("docs", "a.txt")
