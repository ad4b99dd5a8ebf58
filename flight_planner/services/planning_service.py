"""Service for loading sources and running flight batches."""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from ..config import Config, LOAD_FAILURE_MESSAGE
from ..data_loader import LoadFailure, load_flight_requests
from ..reference_data import ReferenceDataStore
from ..validator import FlightValidator
from ..batch_runner import BatchRunner
from ..report import write_report, summarize_results
from ..models.flight import FlightRequest
from ..models.result import BatchReport, FlightResult

logger = logging.getLogger(__name__)


class PlanningService:
    """Service for managing reference data and batch runs."""

    def __init__(self, config: Optional[Config] = None):
        """Initialize planning service."""
        self.config = config or Config()
        self.reference: Optional[ReferenceDataStore] = None
        self.reports: Dict[str, BatchReport] = {}

    def load_reference(self) -> ReferenceDataStore:
        """
        Load the airport and aeroplane tables once and keep them.

        Returns:
            The reference data store

        Raises:
            LoadFailure: If either reference file cannot be read
        """
        if self.reference is None:
            self.reference = ReferenceDataStore.from_files(
                self.config.AIRPORTS_CSV,
                self.config.AEROPLANES_CSV,
                delimiter=self.config.CSV_DELIMITER,
                currency_symbol=self.config.CURRENCY_SYMBOL,
            )
        return self.reference

    def build_runner(self, reference: ReferenceDataStore) -> BatchRunner:
        """Create a batch runner over the given reference data."""
        validator = FlightValidator(reference, hubs=self.config.hubs)
        return BatchRunner(validator, max_workers=self.config.MAX_WORKERS)

    def evaluate(self, flights: List[FlightRequest]) -> List[FlightResult]:
        """
        Evaluate flights against the loaded reference data.

        Raises:
            LoadFailure: If the reference data cannot be loaded
        """
        runner = self.build_runner(self.load_reference())
        return runner.run(flights)

    def output_path_for(self, name: str, output_dir: Optional[str] = None) -> str:
        """Report file path for a named batch."""
        directory = Path(output_dir or self.config.OUTPUT_DIR)
        return str(directory / f"{name}_flights_output.txt")

    def run_batch(self, name: str, flights_path: str, output_path: Optional[str] = None) -> BatchReport:
        """
        Load and evaluate one batch of flights and write its report.

        If any required source fails to load, nothing is evaluated and the
        report carries a single aggregate error instead.

        Args:
            name: Batch name (e.g. "valid")
            flights_path: Path to the batch's flights file
            output_path: Where to write the report, None to skip writing

        Returns:
            BatchReport for the batch
        """
        try:
            reference = self.load_reference()
            flights = load_flight_requests(
                flights_path,
                delimiter=self.config.CSV_DELIMITER,
                currency_symbol=self.config.CURRENCY_SYMBOL,
            )
        except LoadFailure as e:
            logger.error(f"Batch {name!r} not run: {e}")
            report = BatchReport(name=name, error=LOAD_FAILURE_MESSAGE)
            self.reports[name] = report
            return report

        results = self.build_runner(reference).run(flights)

        written = None
        if output_path:
            written = str(write_report(results, output_path, self.config.CURRENCY_SYMBOL))

        report = BatchReport(name=name, results=results, output_path=written)
        self.reports[name] = report
        logger.info(f"Batch {name!r}: {summarize_results(results)}")
        return report

    def run_batches(
        self,
        batches: Optional[Dict[str, str]] = None,
        output_dir: Optional[str] = None,
    ) -> Dict[str, BatchReport]:
        """
        Run several independent batches; a failed batch does not stop the others.

        Args:
            batches: Batch name -> flights file (defaults to configured batches)
            output_dir: Directory for report files

        Returns:
            Batch name -> BatchReport
        """
        batches = batches if batches is not None else self.config.FLIGHT_BATCHES
        reports = {}
        for name, flights_path in batches.items():
            reports[name] = self.run_batch(
                name, flights_path, self.output_path_for(name, output_dir)
            )
        return reports

    def get_status(self) -> Dict:
        """
        Get reference data and batch status.

        Returns:
            Status dictionary
        """
        try:
            reference = self.load_reference()
        except LoadFailure as e:
            logger.error(f"Reference data unavailable: {e}")
            return {
                "status": "error",
                "hubs": self.config.hubs,
                "airports": 0,
                "aeroplanes": 0,
                "batches": {},
                "error": LOAD_FAILURE_MESSAGE,
            }

        return {
            "status": "ready",
            "hubs": self.config.hubs,
            "airports": reference.airport_count,
            "aeroplanes": reference.aeroplane_count,
            "batches": {
                name: report.error or summarize_results(report.results)
                for name, report in self.reports.items()
            },
        }
