"""Tests for rendering token trees."""

from io import StringIO

from rich.console import Console

from gobbledygook.tokenizer import tokenize
from gobbledygook.visualize import visualize_tokens


def render(renderable: object) -> str:
    console = Console(file=StringIO(), width=200, color_system=None)
    console.print(renderable)
    return console.file.getvalue()  # type: ignore


def test_visualize_nested_tokens():
    text = "Please close this window, <a %(cookieLink)>enable <b>super dooper %(persona)</b> cookies</a> and try again"
    output = render(visualize_tokens(tokenize(text), label="sample"))
    lines = output.splitlines()
    assert lines[0].strip() == "sample"
    assert "text 'Please close this window, '" in output
    assert "container <a %(cookieLink)> … </a>" in output
    assert "container <b> … </b>" in output
    assert "marker %(persona)" in output
    # nested one level deeper than its container
    b_line = next(line for line in lines if "<b>" in line)
    persona_line = next(line for line in lines if "%(persona)" in line and "marker" in line)
    assert persona_line.index("marker") > b_line.index("container")

def test_visualize_empty():
    assert render(visualize_tokens([])).strip() == "tokens"
