import json

from typer.testing import CliRunner

from threeset_compare import __version__
from threeset_compare.cli import app

runner = CliRunner()


def test_version():
	result = runner.invoke(app, ["version"])

	assert result.exit_code == 0
	assert __version__ in result.output


def test_compare_prints_score():
	result = runner.invoke(app, ["compare", "cat dog", "dog cat"])

	assert result.exit_code == 0
	assert result.output.strip() == "1.0000"


def test_compare_json():
	result = runner.invoke(app, ["compare", "hello world", "hallo world", "--json"])

	assert result.exit_code == 0
	assert json.loads(result.output) == {"text_a": "hello world", "text_b": "hallo world", "score": 0.875}


def test_dedupe_reads_file_and_writes_output(tmp_path):
	src = tmp_path / "titles.txt"
	src.write_text("Graph Neural Networks\n\nneural graph networks\nProtein Folding\n", encoding="utf-8")
	out = tmp_path / "kept.txt"

	result = runner.invoke(app, ["dedupe", str(src), "--out", str(out)])

	assert result.exit_code == 0
	assert "Kept 2 of 3 titles" in result.output
	assert out.read_text(encoding="utf-8").splitlines() == ["Graph Neural Networks", "Protein Folding"]


def test_dedupe_missing_file(tmp_path):
	result = runner.invoke(app, ["dedupe", str(tmp_path / "missing.txt")])

	assert result.exit_code != 0


def test_rank(tmp_path):
	src = tmp_path / "titles.txt"
	src.write_text("Graph Neural Networks\nProtein Folding Models\n", encoding="utf-8")

	result = runner.invoke(app, ["rank", "protein folding", str(src), "--top-k", "1"])

	assert result.exit_code == 0
	assert "Protein Folding Models" in result.output
	assert "Graph Neural Networks" not in result.output
