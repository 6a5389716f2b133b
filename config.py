# config.py
"""
Run configuration and the generate -> render pipeline.

Validation happens here, once, before anything is generated; the
generator and writers assume they are given valid input.
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from er_graph import Graph
from erdos import generate_erdos_renyi
from rand_source import RNG_KINDS, make_random_source
from render import Output, render


class InvalidConfiguration(ValueError):
    pass


@dataclass(frozen=True)
class GraphConfig:
    nb_vertices: int
    probability: float
    digraph: bool = False
    loops: bool = False
    weights: Tuple[str, ...] = ()
    output: Output = Output.DIMACS
    seed: Optional[int] = None
    rng: str = "python"
    comments: bool = True

    @classmethod
    def from_args(cls, args) -> "GraphConfig":
        try:
            output = Output.parse(args.output)
        except ValueError as exc:
            raise InvalidConfiguration(str(exc)) from exc

        return cls(
            nb_vertices=args.nb_vertices,
            probability=args.probability,
            digraph=args.digraph,
            loops=args.loops,
            weights=tuple(args.weights or ()),
            output=output,
            seed=args.seed,
            rng=args.rng,
            comments=not args.no_comments,
        )

    def validate(self) -> "GraphConfig":
        if self.nb_vertices < 0:
            raise InvalidConfiguration("nb_vertices must be non-negative")
        if math.isnan(self.probability) or not (0.0 <= self.probability <= 1.0):
            raise InvalidConfiguration("probability must be between 0 and 1")
        for w in self.weights:
            text = str(w)
            if not text or any(c.isspace() for c in text):
                raise InvalidConfiguration(f"weight {text!r} must be a non-empty token without whitespace")
        if self.rng not in RNG_KINDS:
            raise InvalidConfiguration(f"rng must be one of {', '.join(RNG_KINDS)}")
        return self


def build(cfg: GraphConfig) -> Graph:
    cfg.validate()
    rng = make_random_source(cfg.rng, cfg.seed)
    return generate_erdos_renyi(
        cfg.nb_vertices,
        cfg.probability,
        directed=cfg.digraph,
        loops=cfg.loops,
        weights=cfg.weights,
        rng=rng,
    )


def run(cfg: GraphConfig) -> str:
    return render(build(cfg), cfg.output, comments=cfg.comments)
