import json

from ingredient_dedup.cli import main


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_no_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "ingredient-dedup" in capsys.readouterr().out


def test_run_writes_output_and_report(tmp_path, sample_recipes, capsys):
    src = _write(tmp_path / "recipes.json", sample_recipes)
    assert main([str(src)]) == 0

    out_file = tmp_path / "recipes_global_deduplicated.json"
    report_file = tmp_path / "recipes_global_deduplicated_removal_report.json"
    cleaned = json.loads(out_file.read_text(encoding="utf-8"))
    assert [r["id"] for r in cleaned] == [10, 11, "c-12", 13, 14]
    assert cleaned[1]["ingredients"] == ["tomato", "onion"]

    report = json.loads(report_file.read_text(encoding="utf-8"))
    assert report["summary"]["totalIngredientsRemoved"] == 6
    assert len(report["removedIngredients"]["salt"]) == 3

    out = capsys.readouterr().out
    assert "Recetas modificadas: 3" in out
    assert "Reducción: 37.5%" in out


def test_explicit_output_path(tmp_path, sample_recipes):
    src = _write(tmp_path / "recipes.json", sample_recipes)
    dest = tmp_path / "clean" / "clean_recipes.json"
    assert main([str(src), str(dest), "--show-analysis"]) == 0
    assert dest.exists()
    assert (tmp_path / "clean" / "clean_recipes_removal_report.json").exists()


def test_no_report_without_removals(tmp_path):
    src = _write(tmp_path / "unique.json", [{"id": 1, "ingredients": ["a"]}, {"id": 2, "ingredients": ["b"]}])
    assert main([str(src)]) == 0
    assert (tmp_path / "unique_global_deduplicated.json").exists()
    assert not (tmp_path / "unique_global_deduplicated_removal_report.json").exists()


def test_preview_writes_nothing(tmp_path, sample_recipes, capsys):
    src = _write(tmp_path / "recipes.json", sample_recipes)
    assert main([str(src), "--preview", "--show-removals"]) == 0
    assert sorted(p.name for p in tmp_path.iterdir()) == ["recipes.json"]
    out = capsys.readouterr().out
    assert "Apariciones duplicadas a eliminar: 6" in out
    assert '"salt" se eliminará de:' in out
    assert "MODO PREVIEW" in out


def test_invalid_batch_exits_with_error(tmp_path):
    src = _write(tmp_path / "bad.json", {"recipes": []})
    assert main([str(src)]) == 1


def test_missing_file_exits_with_error(tmp_path):
    assert main([str(tmp_path / "missing.json")]) == 1


def test_non_utf8_input_exits_with_error(tmp_path):
    src = tmp_path / "latin1.json"
    src.write_bytes('[{"id": 1, "ingredients": ["jalapeño"]}]'.encode("latin-1"))
    assert main([str(src)]) == 1


def test_unwritable_output_exits_with_error(tmp_path, sample_recipes):
    src = _write(tmp_path / "recipes.json", sample_recipes)
    out_dir = tmp_path / "is_a_dir"
    out_dir.mkdir()
    assert main([str(src), str(out_dir)]) == 1
