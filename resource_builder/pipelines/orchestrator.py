from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

from resource_builder.classifiers.resource_classifier import Classification, ResourceClassifier
from resource_builder.models.report import RunReport
from resource_builder.models.resource import ResourceManifest, ResourceRecord
from resource_builder.models.run import RunConfig
from resource_builder.pipelines.completion import CompletionDetector
from resource_builder.scanners.directory_scanner import DirectoryScanner, ScanResult, file_extension
from resource_builder.utils.identifiers import IdentifierGenerator
from resource_builder.utils.logging_utils import get_logger, set_verbose
from resource_builder.writers.file_materializer import CopyResult, FileMaterializer
from resource_builder.writers.manifest_writer import ManifestWriter
from resource_builder.writers.output_directories import OutputDirectoryManager

logger = get_logger(__name__)


@dataclass
class OrchestratorDependencies:
    """Container for dependency-injected subsystem instances."""

    classifier: ResourceClassifier = field(default_factory=ResourceClassifier)
    materializer: FileMaterializer = field(default_factory=FileMaterializer)
    manifest_writer: ManifestWriter = field(default_factory=ManifestWriter)
    directory_manager: OutputDirectoryManager = field(default_factory=OutputDirectoryManager)
    # Built per run from RunConfig when left unset.
    scanner: Optional[DirectoryScanner] = None
    identifier_generator: Optional[IdentifierGenerator] = None


@dataclass
class FileOutcome:
    candidate: Path
    classification: Classification
    record: Optional[ResourceRecord] = None
    copy: Optional[CopyResult] = None


class ResourceBuildOrchestrator:
    """Coordinates one resource build.

    Pipeline:
    - validate config -> clear category dirs -> scan
    - no candidates: write an empty manifest
    - otherwise: classify -> (copy in worker pool) -> record -> finalize once
    - returns a structured RunReport

    The calling thread owns the manifest, the counters and the report.
    Workers only generate identifiers and copy bytes.
    """

    def __init__(self, deps: Optional[OrchestratorDependencies] = None) -> None:
        self.deps = deps or OrchestratorDependencies()

    def build(self, config: RunConfig, run_id: Optional[str] = None) -> RunReport:
        set_verbose(config.verbose)
        report = RunReport.start_new(run_id=run_id)

        problem = self._validate_config(config)
        if problem:
            logger.error("[Empty] %s", problem)
            report.abort(problem)
            return report

        report.manifest_path = str(config.manifest_path)

        # 1. Clear
        self._clear_outputs(config, report)

        # 2. Scan
        scan = self._scan(config, report)
        report.candidates_found = scan.expected_count

        # 3. Process -> finalize
        manifest = ResourceManifest()
        if not scan.candidates:
            logger.warning("[Empty] no resources found in %s", config.input_root)
            self._finalize(manifest, config, report)
        else:
            self._process_candidates(scan.candidates, manifest, config, report)

        report.finalize()
        logger.info(
            "Build finished: status=%s processed=%d/%d skipped=%d errors=%d",
            report.status,
            report.processed_count,
            report.expected_count,
            report.skipped_count,
            len(report.errors),
        )
        return report

    @staticmethod
    def _validate_config(config: RunConfig) -> Optional[str]:
        """
        Missing or blank roots and an input root that is not a directory
        abort the run before anything is cleared. An input root that exists
        but cannot be listed is not caught here: it surfaces as a scan error
        and the run still writes an empty manifest.
        """
        if not config.input_root:
            return "no in directory found! You can specify an input directory via the --in flag"
        if not config.output_root:
            return "no out directory found! You can specify an output directory via the --out flag"
        if not Path(config.input_root).is_dir():
            return f"in directory {config.input_root} does not exist or is not a directory"
        return None

    def _clear_outputs(self, config: RunConfig, report: RunReport) -> None:
        summary = self.deps.directory_manager.clear(config.resources_root)
        for path, error in summary.errors:
            report.add_error(stage="clear", path=path, error=error)

    def _scan(self, config: RunConfig, report: RunReport) -> ScanResult:
        scanner = self.deps.scanner or DirectoryScanner(match_mode=config.extension_match)
        scan = scanner.scan(Path(config.input_root))
        for err in scan.errors:
            report.add_error(stage="scan", path=err.path, error=err.error)
        return scan

    def _process_candidates(
        self,
        candidates: List[Path],
        manifest: ResourceManifest,
        config: RunConfig,
        report: RunReport,
    ) -> None:
        detector = CompletionDetector(
            expected_count=len(candidates),
            on_complete=lambda: self._finalize(manifest, config, report),
        )
        generator = self.deps.identifier_generator or IdentifierGenerator(length=config.identifier_length)

        # Skips are settled before any completion is consumed, so the
        # expected total is final by the time the first file reports back.
        dispatch: List[Tuple[Path, Classification]] = []
        for candidate in candidates:
            classification = self.deps.classifier.classify(file_extension(candidate), config)
            if classification.skip:
                detector.discount()
                report.skipped_count += 1
                logger.debug("[Ignored File] %s because the [ignoreSound] flag is enabled", candidate)
                detector.on_file_handled(counted=False)
                continue
            dispatch.append((candidate, classification))

        if dispatch:
            with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
                future_to_candidate = {
                    executor.submit(self._materialize, candidate, classification, config, generator): candidate
                    for candidate, classification in dispatch
                }
                for future in as_completed(future_to_candidate):
                    candidate = future_to_candidate[future]
                    try:
                        outcome = future.result()
                    except Exception as exc:  # noqa: BLE001
                        logger.exception("Fatal error processing %s", candidate)
                        report.add_error(stage="process", path=str(candidate), error=str(exc))
                    else:
                        self._record(outcome, manifest, report)
                    detector.on_file_handled(counted=True)

        report.expected_count = detector.expected_count
        report.processed_count = detector.processed_count

    def _materialize(
        self,
        candidate: Path,
        classification: Classification,
        config: RunConfig,
        generator: IdentifierGenerator,
    ) -> FileOutcome:
        if classification.category is None:
            return FileOutcome(candidate=candidate, classification=classification)

        identifier = f"{generator.generate()}.{file_extension(candidate)}"
        copy = self.deps.materializer.copy(
            candidate,
            config.resources_root / classification.directory,
            identifier,
        )
        record = ResourceRecord(resource_identifier=identifier, file_name=candidate.name)
        return FileOutcome(candidate=candidate, classification=classification, record=record, copy=copy)

    @staticmethod
    def _record(outcome: FileOutcome, manifest: ResourceManifest, report: RunReport) -> None:
        if outcome.classification.category is None:
            logger.warning("No resource category for %s; counted without a manifest entry", outcome.candidate)
            return

        if outcome.copy is not None and not outcome.copy.ok:
            report.add_error(stage="copy", path=str(outcome.candidate), error=outcome.copy.status)
            return

        manifest.append(outcome.classification.category, outcome.record)
        report.copied_count += 1
        logger.debug("[Processed File] %s -> %s", outcome.candidate, outcome.record.resource_identifier)

    def _finalize(self, manifest: ResourceManifest, config: RunConfig, report: RunReport) -> None:
        summary = self.deps.manifest_writer.finalize(manifest, config.manifest_path)
        report.finalize_count += 1
        report.manifest_written = summary.ok
        if not summary.ok:
            report.add_error(stage="manifest", path=summary.path, error=summary.status)
