import sys
import pytest
from exifwrap.metadata.extract import ToolCommand

FAKE_TOOL = """\
import sys
sys.stdout.write({output!r})
if {echo_args!r}:
    sys.stdout.write("Argv : " + " ".join(sys.argv[1:]) + "\\n")
sys.exit({exit_code!r})
"""

@pytest.fixture
def fake_exiftool(tmp_path):
    """
    Returns a factory building a ToolCommand that prints canned output.

    The fake is a Python script run by the current interpreter, so tests never
    depend on a real exiftool install.
    """
    def make(output="", exit_code=0, echo_args=False, name="fake_exiftool.py"):
        script = tmp_path / name
        script.write_text(
            FAKE_TOOL.format(output=output, exit_code=exit_code, echo_args=echo_args),
            encoding="utf-8",
        )
        return ToolCommand((sys.executable, str(script)))
    return make

@pytest.fixture
def media_file(tmp_path):
    """An empty file standing in for a photo."""
    p = tmp_path / "IMG_0001.CR2"
    p.write_bytes(b"rawdata")
    return p
