"""Unit tests for Cargo project text generation."""

import pytest

from atcoder_init.domain import codegen
from atcoder_init.domain.models import Sample, task_slug


@pytest.mark.parametrize("name", ["A", "Ex", "abc", "B1", "ÄÖ"])
def test_slug_is_idempotent(name):
    assert task_slug(task_slug(name)) == task_slug(name)


def test_cargo_toml_fields():
    toml = codegen.generate_cargo_toml("abc100", "alice", 'rand = "0.7"\n')

    assert 'name = "abc100"' in toml
    assert 'version = "0.1.0"' in toml
    assert 'authors = ["alice"]' in toml
    assert 'edition = "2018"' in toml
    assert "[[bin]]" in toml
    assert 'path = "src/main.rs"' in toml
    assert toml.endswith('[dependencies]\nrand = "0.7"\n\n')


def test_cargo_toml_without_author():
    assert 'authors = [""]' in codegen.generate_cargo_toml("abc100", None, "")


def test_main_rs_sorted_modules():
    main_rs = codegen.generate_main_rs(["Beta", "Alpha"])

    assert main_rs.startswith("mod alpha;\nmod beta;\n")
    assert main_rs.index('"alpha" => alpha::main(),') < main_rs.index('"beta" => beta::main(),')
    assert "if args.len() < 2 {" in main_rs
    assert "_ => {}," in main_rs


def test_main_rs_is_deterministic():
    assert codegen.generate_main_rs(["C", "A", "B"]) == codegen.generate_main_rs(["B", "C", "A"])


def test_test_cases_embed_samples_literally():
    block = codegen.generate_test_cases("abc100", "a", [Sample("1 2\n", "3\n"), Sample("4 5\n", "9\n")])

    assert block.startswith("#[cfg(test)]\nmod tests {\n    use super::*;\n    use cli_test_dir::*;\n")
    assert "fn sample_1()" in block
    assert "fn sample_2()" in block
    assert "fn sample_3()" not in block
    assert '.output_with_stdin(r#"1 2\n"#)' in block
    assert 'assert_eq!(output.stdout_str(), r#"3\n"#);' in block
    assert '.arg("a")' in block
    assert 'TestDir::new("abc100", "a_sample_1")' in block
    assert 'assert!(output.stderr_str().is_empty(), "stderr is not empty");' in block
    assert block.endswith("    }\n}\n")


def test_test_cases_without_samples():
    block = codegen.generate_test_cases("abc100", "a", [])

    assert "#[test]" not in block
    assert block.endswith("use cli_test_dir::*;\n\n}\n")


def test_raw_string_grows_delimiter():
    assert codegen.raw_string_literal("plain") == 'r#"plain"#'
    assert codegen.raw_string_literal('say "#hi') == 'r##"say "#hi"##'
    assert codegen.raw_string_literal('"# and "##') == 'r###""# and "##"###'


def test_task_source_prepends_template_verbatim():
    samples = [Sample("1\n", "1\n")]
    block = codegen.generate_test_cases("abc100", "a", samples)

    for template in ["pub fn main() {}", "pub fn main() {}\n\n\n", ""]:
        source = codegen.generate_task_source(template, "abc100", "a", samples)
        assert source == template + block


def test_task_source_filename():
    assert codegen.task_source_filename("A") == "a.rs"
