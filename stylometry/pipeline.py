"""End-to-end run: load corpus, compute features, write report."""

from typing import Optional

from .config import Config
from .corpus import load_corpus
from .engine import StylometryEngine
from .report.assembler import FeatureReport
from .report.writer import write_report
from .utils.logging import get_logger, set_run_id

logger = get_logger(__name__)


def run_analysis(
    input_file: str,
    output_dir: Optional[str] = None,
    config: Optional[Config] = None,
    engine: Optional[StylometryEngine] = None,
    write_text: Optional[bool] = None,
) -> FeatureReport:
    """Analyze one corpus file and persist its report.

    Args:
        input_file: UTF-8 corpus file.
        output_dir: Report directory. Defaults to config.output.directory.
        config: Configuration. Uses defaults if not provided.
        engine: Pre-built engine. Built from config if not provided.
        write_text: Also write the text summary. Defaults to config.output.write_text.

    Returns:
        The FeatureReport that was written.
    """
    config = config or Config()
    engine = engine or StylometryEngine.from_config(config)
    output_dir = output_dir or config.output.directory
    if write_text is None:
        write_text = config.output.write_text

    run_id = set_run_id()
    logger.info(f"Starting analysis run {run_id} for {input_file}")

    snapshot = load_corpus(input_file)
    report = engine.analyze(snapshot)
    write_report(report, output_dir, write_text=write_text)

    logger.info(f"Finished analysis run {run_id}")
    return report
