"""Built-in text templates for the generated Cargo project."""

# Dependencies section body used when no file is supplied with -d.
DEFAULT_DEPENDENCIES = 'cli_test_dir = "0.1"\n'

# Per-task solution stub used when no file is supplied with -t.
DEFAULT_TEMPLATE = """\
#[allow(unused_imports)]
use std::io::{self, BufRead, Read, Write};

pub fn main() {
    let mut input = String::new();
    io::stdin().read_to_string(&mut input).unwrap();
    let mut tokens = input.split_whitespace();
    let _ = &mut tokens;
}
"""

CARGO_TOML_TEMPLATE = """\
[package]
name = "{name}"
version = "{version}"
authors = ["{author}"]
edition = "{edition}"

[[bin]]
name = "{name}"
path = "src/{main_file}"

[dependencies]
{dependencies}
"""

MAIN_RS_TEMPLATE = """\
{mods}
fn main() {{
    let mut args = std::env::args();
    if args.len() < 2 {{
        return;
    }}
    match args.nth(1).unwrap().as_str() {{
{arms}
        _ => {{}},
    }}
}}
"""

TEST_CASE_TEMPLATE = """\
    #[test]
    fn {test_name}() {{
        let test_dir = TestDir::new("{binary}", "{slug}_{test_name}");
        let output = test_dir
            .cmd()
            .arg("{slug}")
            .output_with_stdin({input})
            .tee_output()
            .expect_success();
        assert_eq!(output.stdout_str(), {output});
        assert!(output.stderr_str().is_empty(), "stderr is not empty");
    }}
"""

TEST_MODULE_TEMPLATE = """\
#[cfg(test)]
mod tests {{
    use super::*;
    use cli_test_dir::*;

{tests}}}
"""
