"""Startup pipeline plumbing.

A pipeline is an ordered list of processors, each exposing ``process(args)``.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable


@dataclass
class PipelineArgs:
    custom_data: Dict[str, Any] = field(default_factory=dict)
    aborted: bool = False

    def abort_pipeline(self) -> None:
        self.aborted = True


def run_pipeline(processors: Iterable[Any], args: PipelineArgs | None = None) -> PipelineArgs:
    args = args or PipelineArgs()
    for processor in processors:
        if args.aborted:
            break
        processor.process(args)
    return args


__all__ = ["PipelineArgs", "run_pipeline"]
