"""Sample the rows of a CSV file.

Usage::

    python scripts/sample_table.py input_path=pool.csv output_path=batch.csv n=20 by=[label]
"""

from __future__ import annotations

import logging
from pathlib import Path

import hydra
import pandas as pd
from hydra.utils import instantiate
from omegaconf import DictConfig

from takesample.config import SampleTableConfig, load_sample_table_config
from takesample.dispatch import take_sample

logger = logging.getLogger(__name__)


def sample_table(table: pd.DataFrame, config: SampleTableConfig) -> pd.DataFrame:
    """Apply the configured row sampling to ``table``."""
    sampler = instantiate(config.sampler) if config.sampler is not None else None
    return take_sample(
        table,
        n=config.n,
        replace=config.replace,
        by=list(config.by) or None,
        weights=config.weights,
        sampler=sampler,
        seed=config.seed,
    )


@hydra.main(version_base=None, config_path="../configs", config_name="sample_table")
def main(cfg: DictConfig) -> None:
    """Read, sample and write one table."""
    config = load_sample_table_config(cfg)
    table = pd.read_csv(config.input_path)
    logger.info(f"Loaded {len(table)} rows from {config.input_path}")

    sampled = sample_table(table, config)

    out_path = Path(config.output_path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    sampled.to_csv(out_path, index=False)
    logger.info(f"Wrote {len(sampled)} sampled rows to {out_path}")


if __name__ == "__main__":
    main()
