"""Text generation for the Cargo project files.

Everything here is a pure function of its arguments so that the emitted
project is byte-identical across runs that observe the same contest.
"""

from typing import Iterable, Sequence

from .models import Sample, task_slug
from .templates import (
    CARGO_TOML_TEMPLATE,
    MAIN_RS_TEMPLATE,
    TEST_CASE_TEMPLATE,
    TEST_MODULE_TEMPLATE,
)

PROJECT_VERSION = "0.1.0"
RUST_EDITION = "2018"
MANIFEST_FILE = "Cargo.toml"
SOURCE_DIR = "src"
MAIN_FILE = "main.rs"
SOURCE_EXTENSION = "rs"


def raw_string_literal(text: str) -> str:
    """Wrap ``text`` in a Rust raw string literal that embeds it verbatim.

    One ``#`` is used unless the text itself contains the terminator, in
    which case marks are added until the terminator no longer occurs.
    """
    hashes = 1
    while '"' + "#" * hashes in text:
        hashes += 1
    marks = "#" * hashes
    return f'r{marks}"{text}"{marks}'


def generate_cargo_toml(project_name: str, author: str | None, dependencies: str) -> str:
    """Generate Cargo.toml for the contest project."""
    return CARGO_TOML_TEMPLATE.format(
        name=project_name,
        version=PROJECT_VERSION,
        author=author or "",
        edition=RUST_EDITION,
        main_file=MAIN_FILE,
        dependencies=dependencies,
    )


def generate_main_rs(task_names: Iterable[str]) -> str:
    """Generate the dispatcher that runs the task named by the first argument."""
    slugs = sorted({task_slug(name) for name in task_names})
    mods = "".join(f"mod {slug};\n" for slug in slugs)
    arms = "\n".join(f'        "{slug}" => {slug}::main(),' for slug in slugs)
    return MAIN_RS_TEMPLATE.format(mods=mods, arms=arms)


def generate_sample(binary: str, slug: str, test_name: str, sample: Sample) -> str:
    """Generate a test checking that the task passes one sample case."""
    return TEST_CASE_TEMPLATE.format(
        test_name=test_name,
        binary=binary,
        slug=slug,
        input=raw_string_literal(sample.input),
        output=raw_string_literal(sample.output),
    )


def generate_test_cases(binary: str, slug: str, samples: Sequence[Sample]) -> str:
    """Generate a `tests` module checking that the task passes all sample cases."""
    tests = "\n".join(
        generate_sample(binary, slug, f"sample_{index}", sample)
        for index, sample in enumerate(samples, start=1)
    )
    return TEST_MODULE_TEMPLATE.format(tests=tests)


def generate_task_source(
    template: str, binary: str, slug: str, samples: Sequence[Sample]
) -> str:
    """Generate a per-task source file: the template followed by its tests."""
    return template + generate_test_cases(binary, slug, samples)


def task_source_filename(name: str) -> str:
    return f"{task_slug(name)}.{SOURCE_EXTENSION}"
