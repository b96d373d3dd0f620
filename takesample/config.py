"""Configuration objects for the ``sample_table`` command-line tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from omegaconf import DictConfig, OmegaConf

from takesample.engine import validate_size


@dataclass
class SampleTableConfig:
    """Settings for sampling the rows of a CSV file.

    Attributes:
        input_path: CSV file to read.
        output_path: CSV file to write the sampled rows to.
        n: Rows per group (``None`` keeps every row, i.e. a shuffle).
        replace: Whether to sample with replacement.
        by: Grouping columns; ``n`` applies to each group.
        weights: Optional column holding per-row selection weights.
        seed: Seed for the default sampler when ``sampler`` is not set.
        sampler: Optional Hydra node (with ``_target_``) building an
            :class:`~takesample.primitive.base.IndexSampler`.
    """

    input_path: str = "???"
    output_path: str = "???"
    n: Optional[int] = None
    replace: bool = False
    by: List[str] = field(default_factory=list)
    weights: Optional[str] = None
    seed: Optional[int] = None
    sampler: Any = None


def load_sample_table_config(cfg: DictConfig | dict[str, Any]) -> SampleTableConfig:
    """Merge ``cfg`` over the structured defaults and validate it.

    Args:
        cfg: Hydra/OmegaConf config (or plain dict) with the fields of
            :class:`SampleTableConfig`.

    Returns:
        A validated :class:`SampleTableConfig`.

    Raises:
        omegaconf.errors.MissingMandatoryValue: If a path is not set.
        ValueError: If ``seed`` and ``sampler`` are both set.
        InvalidSizeError: If ``n`` is negative.
    """
    merged = OmegaConf.merge(OmegaConf.structured(SampleTableConfig), cfg)
    config: SampleTableConfig = OmegaConf.to_object(merged)
    if config.seed is not None and config.sampler is not None:
        raise ValueError("set either seed or sampler, not both")
    if config.n is not None:
        validate_size(config.n, 0)
    return config
