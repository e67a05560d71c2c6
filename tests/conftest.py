import pytest
import shutil
import tempfile
from pathlib import Path

from core.file_manager import FileManager

@pytest.fixture
def temp_workspace():
    """Create a temporary storage root for file operations."""
    temp_dir = tempfile.mkdtemp()
    workspace = Path(temp_dir).resolve()
    yield workspace
    shutil.rmtree(temp_dir, ignore_errors=True)

@pytest.fixture
def root(temp_workspace):
    """Storage root as the plain string the core functions take."""
    return str(temp_workspace)

@pytest.fixture
def manager(root):
    return FileManager(root)

@pytest.fixture
def sample_tree(temp_workspace):
    """
    A small tree:

        notes.txt           "Remember: todo list"
        Report_final.TXT    "quarterly numbers"
        report.md           "# Report"
        data.json           '{"status": "TODO"}'
        image.png           binary, contains b"TODO"
        docs/
            report_draft.txt  "draft TODO"
            deep/
                report_old.txt "nothing here"
        empty/
    """
    ws = temp_workspace
    (ws / "notes.txt").write_text("Remember: todo list")
    (ws / "Report_final.TXT").write_text("quarterly numbers")
    (ws / "report.md").write_text("# Report")
    (ws / "data.json").write_text('{"status": "TODO"}')
    (ws / "image.png").write_bytes(b"\x89PNG\r\n\x1a\nTODO\x00\x01")
    (ws / "docs" / "deep").mkdir(parents=True)
    (ws / "docs" / "report_draft.txt").write_text("draft TODO")
    (ws / "docs" / "deep" / "report_old.txt").write_text("nothing here")
    (ws / "empty").mkdir()
    return ws
