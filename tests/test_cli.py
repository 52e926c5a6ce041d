import io
import json

from apps.event_contracts import cli


def run(argv, stdin_text=""):
    out, err = io.StringIO(), io.StringIO()
    code = cli.main(argv, out=out, err=err, stdin=io.StringIO(stdin_text))
    return code, out.getvalue(), err.getvalue()


def test_cli_parser_defaults():
    args = cli.build_parser().parse_args(["sample", "earn"])

    assert args.command == "sample"
    assert args.scenario == "valid"


def test_types_lists_event_types():
    code, out, _ = run(["types"])

    assert code == 0
    assert out.split() == ["earn", "redeem", "tier_update"]


def test_show_prints_contract_json():
    code, out, _ = run(["show", "redeem"])

    assert code == 0
    assert json.loads(out)["fields"]["points_used"] == "number"


def test_validate_valid_sample_exits_zero():
    code, out, _ = run(["validate", "earn", "--scenario", "valid"])

    assert code == 0
    assert "✓ Event matches the expected contract." in out


def test_validate_drifted_sample_exits_one():
    code, out, _ = run(["validate", "tier_update", "--scenario", "drifted"])

    assert code == 1
    assert "Missing fields:\n- partner_id" in out
    assert "new_tier (expected string, got object)" in out
    assert "Unexpected fields:\n- reason" in out


def test_validate_reads_stdin_and_prints_json():
    payload = {"user_id": "12345", "points_used": "500"}
    code, out, _ = run(["validate", "redeem", "--json"], stdin_text=json.dumps(payload))

    result = json.loads(out)
    assert code == 1
    assert result["missingFields"] == ["reward_id", "partner_id", "timestamp"]
    assert result["typeMismatches"] == [{"field": "points_used", "expected": "number", "actual": "string"}]


def test_validate_file(tmp_path):
    path = tmp_path / "earn.json"
    path.write_text(json.dumps({"user_id": "1"}), encoding="utf-8")

    code, out, _ = run(["validate", "earn", "--file", str(path)])

    assert code == 1
    assert out.startswith("Event Type: earn\n")


def test_validate_malformed_stdin_exits_two():
    code, out, err = run(["validate", "earn"], stdin_text="{oops")

    assert code == 2
    assert out == ""
    assert err.strip() == "Invalid JSON. Please fix formatting."


def test_validate_missing_file_exits_two(tmp_path):
    code, _, err = run(["validate", "earn", "--file", str(tmp_path / "missing.json")])

    assert code == 2
    assert err.strip() == "Invalid JSON. Please fix formatting."


def test_unknown_event_type_exits_two():
    code, _, err = run(["validate", "points", "--scenario", "valid"])

    assert code == 2
    assert err.strip() == "Unknown event type: points"


def test_validate_non_utf8_file_exits_two(tmp_path):
    path = tmp_path / "earn.json"
    path.write_bytes(b'{"user_id": "\xff"}')

    code, out, err = run(["validate", "earn", "--file", str(path)])

    assert code == 2
    assert out == ""
    assert err.strip() == "Invalid JSON. Please fix formatting."


def test_validate_non_utf8_stdin_exits_two():
    out, err = io.StringIO(), io.StringIO()
    stdin = io.TextIOWrapper(io.BytesIO(b'{"user_id": "\xff"}'), encoding="utf-8")

    code = cli.main(["validate", "earn"], out=out, err=err, stdin=stdin)

    assert code == 2
    assert err.getvalue().strip() == "Invalid JSON. Please fix formatting."


def test_validate_nan_from_stdin_exits_two():
    code, _, err = run(["validate", "earn"], stdin_text='{"amount_spent": NaN}')

    assert code == 2
    assert err.strip() == "Invalid JSON. Please fix formatting."
