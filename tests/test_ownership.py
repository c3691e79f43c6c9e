from codeusages.core import OwnershipRule
from codeusages.ownership import match, parse, parse_lines, rule_matches


def test_parse_skips_comments_and_blank_lines():
    rules = parse_lines([
        "# frontend",
        "",
        "   ",
        "/web/* @org/web alice",
        "/docs/**  bob",
    ])
    assert rules == [
        OwnershipRule("web/*", ("@org/web", "alice")),
        OwnershipRule("docs/**", ("bob",)),
    ]


def test_parse_strips_first_character_unconditionally():
    assert parse_lines(["*.js carol"]) == [OwnershipRule(".js", ("carol",))]


def test_single_token_line_has_no_owners():
    assert parse_lines(["/orphan"]) == [OwnershipRule("orphan", ())]


def test_redeclared_pattern_keeps_position_and_takes_last_owners():
    rules = parse_lines(["/a/* alice", "/b/* bob", "/a/* carol"])
    assert rules == [
        OwnershipRule("a/*", ("carol",)),
        OwnershipRule("b/*", ("bob",)),
    ]


def test_parse_reads_file_with_crlf(tmp_path):
    path = tmp_path / "CODEOWNERS"
    path.write_bytes(b"# owners\r\n/src/** dev\r\n")
    assert parse(path) == [OwnershipRule("src/**", ("dev",))]


def test_glob_semantics():
    def matches(pattern, path):
        return rule_matches(OwnershipRule(pattern, ()), path)

    assert matches("a/*", "a/b.txt")
    assert not matches("a/*", "a/b/c.txt")
    assert matches("a/**", "a/b/c.txt")
    assert matches("src/?.py", "src/x.py")
    assert not matches("src/?.py", "src/xy.py")
    assert matches("src/[ab].py", "src/b.py")
    assert not matches("src/[ab].py", "src/c.py")
    assert matches("{web,api}/index.ts", "api/index.ts")
    assert not matches("a/*", "a/.env")


def test_match_scenario_single_owner():
    agg = match({"a/b.txt": [1, 3]}, parse_lines(["/a/* alice"]))
    assert list(agg) == ["alice"]
    assert agg["alice"].count == 1
    assert agg["alice"].files[0].path == "a/b.txt"
    assert agg["alice"].files[0].lines == (1, 3)


def test_two_matching_patterns_list_file_twice():
    rules = parse_lines(["/a/* alice", "/a/** alice"])
    agg = match({"a/b.txt": [2]}, rules)
    assert agg["alice"].count == 2
    assert [f.path for f in agg["alice"].files] == ["a/b.txt", "a/b.txt"]


def test_all_owners_of_a_rule_are_credited():
    agg = match({"web/app.ts": [5]}, parse_lines(["/web/* alice bob"]))
    assert {o: a.count for o, a in agg.items()} == {"alice": 1, "bob": 1}


def test_unmatched_files_are_omitted():
    agg = match({"other/x.txt": [1], "a/b.txt": [1]}, parse_lines(["/a/* alice"]))
    assert [f.path for f in agg["alice"].files] == ["a/b.txt"]
    assert all(f.path != "other/x.txt" for a in agg.values() for f in a.files)


def test_owner_order_follows_first_encounter():
    rules = parse_lines(["/a/* zed", "/b/* amy", "/a/* zed"])
    found = {"b/1.txt": [1], "a/2.txt": [1]}
    assert list(match(found, rules)) == ["amy", "zed"]


def test_owner_less_rule_contributes_nothing():
    assert match({"a/b.txt": [1]}, parse_lines(["/a/*"])) == {}


def test_aggregated_files_all_come_from_scan_result():
    found = {"a/b.txt": [1], "a/c.txt": [4, 9]}
    agg = match(found, parse_lines(["/a/* alice", "/a/c.txt bob"]))
    for owner in agg.values():
        for hit in owner.files:
            assert list(hit.lines) == found[hit.path]
