"""
Results Writer
==============
Serializes the final RunSummary into a JSON report.
"""
import json
import logging
import os

from docgen.models.run_summary import RunSummary

logger = logging.getLogger(__name__)

class ResultsWriter:
    """
    Writes the outcome of a run (per-file results, filesystem errors and
    counters) to a JSON file.
    """

    @staticmethod
    def write_results(summary: RunSummary, output_path: str = "docgen_results.json") -> bool:
        """
        Dump ``summary`` to ``output_path``. Returns False if writing failed.
        """
        try:
            data = summary.model_dump()

            abs_output = os.path.abspath(output_path)
            logger.info("Writing run results to %s", abs_output)

            with open(abs_output, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)

            return True

        except Exception as e:
            logger.error("Failed to write %s: %s", output_path, e, exc_info=True)
            return False
