"""Service for writing the generated Cargo project to disk."""

import shutil
import tempfile
from pathlib import Path

from loguru import logger

from atcoder_init.domain import codegen
from atcoder_init.domain.exceptions import FileSystemError, InvalidStateError
from atcoder_init.domain.models import ContestIdentifier, TaskSamples, task_slug


class ProjectGenerator:
    """Materializes a contest project under a root directory."""

    def __init__(self, root: Path | str):
        self.root = Path(root)

    def project_dir(self, identifier: ContestIdentifier) -> Path:
        return self.root / identifier.contest_id

    def ensure_absent(self, identifier: ContestIdentifier) -> None:
        """
        Refuse to touch an existing project directory.

        Raises:
            InvalidStateError: If ``<root>/<contest-id>`` already exists
        """
        target = self.project_dir(identifier)
        if target.exists() or target.is_symlink():
            raise InvalidStateError(f"{identifier.contest_id} is already exists")

    def render(
        self,
        identifier: ContestIdentifier,
        username: str | None,
        dependencies: str,
        template: str,
        samples: TaskSamples,
    ) -> dict[Path, str]:
        """Render every file of the project, keyed by its path relative to the project dir."""
        name = identifier.contest_id
        src = Path(codegen.SOURCE_DIR)

        files = {
            Path(codegen.MANIFEST_FILE): codegen.generate_cargo_toml(name, username, dependencies),
            src / codegen.MAIN_FILE: codegen.generate_main_rs(samples.keys()),
        }
        for task_name in sorted(samples, key=task_slug):
            slug = task_slug(task_name)
            files[src / codegen.task_source_filename(task_name)] = codegen.generate_task_source(
                template, name, slug, samples[task_name]
            )
        return files

    def generate(
        self,
        identifier: ContestIdentifier,
        username: str | None,
        dependencies: str,
        template: str,
        samples: TaskSamples,
    ) -> Path:
        """
        Write the project and return its directory.

        Files are written into a staging directory that is renamed into place
        once complete, so a failure never leaves a partial project behind.

        Raises:
            InvalidStateError: If the project directory already exists
            FileSystemError: If any directory or file cannot be written
        """
        self.ensure_absent(identifier)
        target = self.project_dir(identifier)
        files = self.render(identifier, username, dependencies, template, samples)

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            staging = Path(tempfile.mkdtemp(prefix=f".{identifier.contest_id}-", dir=self.root))
            # mkdtemp creates the directory private to the owner
            staging.chmod(0o755)
        except OSError as e:
            raise FileSystemError(f"Failed to create project directory under {self.root}: {e}") from e

        try:
            for relative, content in files.items():
                path = staging / relative
                path.parent.mkdir(parents=True, exist_ok=True)
                path.write_text(content, encoding="utf-8")
                logger.debug(f"Wrote {target / relative}")
            self._move_into_place(identifier, staging, target)
        except OSError as e:
            shutil.rmtree(staging, ignore_errors=True)
            raise FileSystemError(f"Failed to write project {target}: {e}") from e
        except BaseException:
            shutil.rmtree(staging, ignore_errors=True)
            raise

        logger.info(f"Created {target} with {len(samples)} task(s)")
        return target

    def _move_into_place(self, identifier: ContestIdentifier, staging: Path, target: Path) -> None:
        """
        Rename the staging directory onto ``target`` without clobbering.

        ``target`` is reserved with an exclusive mkdir first, so the rename
        only ever replaces the empty directory this call created.
        """
        try:
            target.mkdir()
        except FileExistsError as e:
            raise InvalidStateError(f"{identifier.contest_id} is already exists") from e

        try:
            staging.rename(target)
        except OSError:
            target.rmdir()
            raise
