import json

from main import main

CATALOG = {
    "version": 1,
    "packages": [
        {"id": "base", "label": "US Recruiters", "cost": 100, "base": True, "locked": True},
        {"id": "extra", "label": "Resume Review", "cost": "50.00", "group": "Coaching",
         "rate": "per session"},
    ],
}


def write_catalog(tmp_path):
    path = tmp_path / "packages.json"
    path.write_text(json.dumps(CATALOG), encoding="utf-8")
    return str(path)


def test_quote_prints_receipt(tmp_path, capsys):
    catalog = write_catalog(tmp_path)
    code = main(
        ["--log-file", str(tmp_path / "cli.log"), "quote", catalog,
         "--select", "extra", "--promo", " return15 "]
    )
    out = capsys.readouterr().out
    assert code == 0
    assert "[Coaching] Resume Review" in out
    assert "$114.75" in out
    assert "RETURN15 applied: -15% discount!" in out


def test_quote_unknown_package(tmp_path):
    catalog = write_catalog(tmp_path)
    assert main(["--log-file", str(tmp_path / "cli.log"), "quote", catalog, "--select", "zzz"]) == 2


def test_ingest_command(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("RECIPIENTS_SQLITE_PATH", str(tmp_path / "r.db"))
    folder = tmp_path / "csv"
    folder.mkdir()
    (folder / "list.csv").write_text("email\na@example.com\na@example.com\n", encoding="utf-8")
    code = main(
        ["--log-file", str(tmp_path / "cli.log"), "ingest", str(folder),
         "--store-config", str(tmp_path / "missing.conf")]
    )
    assert code == 0
    assert "1 new recipients" in capsys.readouterr().out


def test_quote_json(tmp_path, capsys):
    catalog = write_catalog(tmp_path)
    code = main(["--log-file", str(tmp_path / "cli.log"), "quote", catalog, "--json"])
    data = json.loads(capsys.readouterr().out)
    assert code == 0
    assert [p["id"] for p in data["packages"]] == ["base"]
    assert data["packages"][0]["cost"] == "100.00"
    assert data["packages"][0]["group"] == "Base Package"
    assert data["totals"]["final_cost"] == "90.00"
    assert data["promo"] == ""


def test_quote_json_with_promo(tmp_path, capsys):
    catalog = write_catalog(tmp_path)
    main(["--log-file", str(tmp_path / "cli.log"), "quote", catalog,
          "--select", "extra", "--promo", "RETURN15", "--json"])
    data = json.loads(capsys.readouterr().out)
    assert [p["id"] for p in data["packages"]] == ["base", "extra"]
    assert data["packages"][1]["group"] == "Coaching"
    assert data["totals"]["final_cost"] == "114.75"
    assert data["promo"] == "RETURN15 applied: -15% discount!"
