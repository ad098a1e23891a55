from __future__ import annotations

"""
Build Domain Data Models.

Defines the data structures exchanged between the discovery service, the
build orchestrator and the interface layer: the classified file set, the
per-file build results, run statistics and the unified run result.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

# -----------------------------------------------------------------------------
# DISCOVERY MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ClassifiedFileSet:
    """
    Token files found in the extracted archive, bucketed by filename suffix.

    Attributes:
        reference_files: ``*.ref.inp.json`` files, loaded for resolution only.
        theme_files: ``*.theme.inp.json`` files, emitted under a theme selector.
        output_files: Remaining ``*.inp.json`` files, emitted under ``:root``.
    """
    reference_files: Tuple[str, ...] = ()
    theme_files: Tuple[str, ...] = ()
    output_files: Tuple[str, ...] = ()

    @property
    def all_files(self) -> Tuple[str, ...]:
        """Source set for reference resolution: reference, theme, output."""
        return self.reference_files + self.theme_files + self.output_files

    @property
    def total(self) -> int:
        return len(self.all_files)

    @property
    def buildable_count(self) -> int:
        return len(self.theme_files) + len(self.output_files)


# -----------------------------------------------------------------------------
# BUILD MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class BuildResult:
    """
    Outcome of one successfully generated CSS file.

    Attributes:
        output_path: Absolute path of the written CSS file.
        token_count: Number of tokens defined by the input file.
        input_path: Source token file.
    """
    output_path: str
    token_count: int
    input_path: str


@dataclass(frozen=True)
class FileError:
    """
    Encapsulates a per-file processing failure.

    Attributes:
        rel_path: Input file identifier (basename).
        error: Descriptive exception message.
    """
    rel_path: str
    error: str


@dataclass
class ProcessingStats:
    """
    Mutable run counters filled in by the build orchestrator.

    Attributes:
        tokens_processed: Tokens emitted across all generated files.
        tokens_skipped: Number of input files that failed to build.
        output_token_counts: Token count per generated file path.
        errors: Failures recorded while building individual files.
    """
    tokens_processed: int = 0
    tokens_skipped: int = 0
    output_token_counts: Dict[str, int] = field(default_factory=dict)
    errors: List[FileError] = field(default_factory=list)

    def record_success(self, result: BuildResult) -> None:
        self.tokens_processed += result.token_count
        self.output_token_counts[result.output_path] = result.token_count

    def record_failure(self, file_name: str, message: str) -> None:
        self.tokens_skipped += 1
        self.errors.append(FileError(rel_path=file_name, error=message))


# -----------------------------------------------------------------------------
# RUN RESULT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class RunResult:
    """
    Unified result of a complete conversion run.

    Attributes:
        ok: Flag indicating the run completed.
        error: Descriptive message in case of a fatal failure.
        archive_path: Input archive as given on the command line.
        output_dir: Resolved directory receiving the CSS files.
        reference_files: Reference files, relative to the archive root.
        input_files: Output and theme files, relative to the archive root.
        results: One entry per generated CSS file.
        stats: Aggregated token counters.
    """
    ok: bool
    error: str
    archive_path: str
    output_dir: str
    reference_files: List[str] = field(default_factory=list)
    input_files: List[str] = field(default_factory=list)
    results: List[BuildResult] = field(default_factory=list)
    stats: ProcessingStats = field(default_factory=ProcessingStats)


def create_error_result(error: str, archive_path: str, output_dir: str = "") -> RunResult:
    """Create a failed run result."""
    return RunResult(ok=False, error=error, archive_path=archive_path, output_dir=output_dir)
