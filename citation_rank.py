#!/usr/bin/env python3

import argparse
import os
import sys
import time
from typing import List, Optional, TextIO

import degree_centrality
import pagerank_solver
from citation_graph import ParseError, load_from_source
from edge_source import is_gcs_uri, open_edge_source, split_gcs_uri
from event_log import log_event
from graph_stats import degree_summary
from ranked_list import RankedList

INPUT = os.environ.get("CITATION_RANK_INPUT", "data/cit-HepTh.txt")
TOPK = int(os.environ.get("CITATION_RANK_TOPK", "5"))

EXIT_IO_ERROR = 1
EXIT_PARSE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="citation-rank", description="Rank papers in a citation network.")
    ap.add_argument("--input", default=INPUT, help='Edge list path or "gs://bucket/object".')
    ap.add_argument("--topk", type=int, default=TOPK, help=f"Entries to print per ranking (default {TOPK}).")
    ap.add_argument("--measure", choices=("degree", "pagerank", "both"), default="both")
    ap.add_argument("--damping", type=float, default=pagerank_solver.DAMPING)
    ap.add_argument("--max-iter", type=int, default=pagerank_solver.MAX_ITERATIONS)
    ap.add_argument("--tol", type=float, default=pagerank_solver.TOLERANCE)
    ap.add_argument("--stats", action="store_true", help="Also print in/out degree statistics.")
    return ap


def print_ranking(title: str, ranked: RankedList, out: TextIO) -> None:
    out.write(f"{title}: \n{ranked}\n")


def run(args: argparse.Namespace, out: Optional[TextIO] = None) -> int:
    if out is None:
        out = sys.stdout
    t0 = time.time()
    try:
        with open_edge_source(args.input) as stream:
            graph = load_from_source(stream)
    except ParseError as e:
        log_event("parse_error", source=args.input, line_number=e.line_number, reason=e.reason)
        sys.stderr.write(f"{args.input}: {e}\n")
        return EXIT_PARSE_ERROR
    except OSError as e:
        log_event("io_error", source=args.input, error=str(e))
        sys.stderr.write(f"{args.input}: {e}\n")
        return EXIT_IO_ERROR
    log_event(
        "graph_loaded",
        source=args.input,
        vertices=graph.num_vertices(),
        edges=graph.num_edges(),
        seconds=round(time.time() - t0, 3),
    )

    iters = None
    if args.measure in ("degree", "both"):
        t1 = time.time()
        degree_ranks = degree_centrality.compute(graph)
        log_event("degree_computed", seconds=round(time.time() - t1, 3))
        print_ranking("Degree Centrality Scores", degree_ranks.top(args.topk), out)

    if args.measure in ("pagerank", "both"):
        scores, iters, converged, pr_s = pagerank_solver.pagerank_iterative(
            graph, d=args.damping, tol=args.tol, max_iter=args.max_iter
        )
        log_event("pagerank_computed", iterations=iters, converged=converged, seconds=round(pr_s, 3))
        pagerank_ranks = RankedList(scores, measure=pagerank_solver.MEASURE)
        print_ranking("PageRank Centrality Scores", pagerank_ranks.top(args.topk), out)

    if args.stats:
        summary = degree_summary(graph)
        if iters is not None:
            out.write(f"PAGERANK_ITERS: {iters}\n\n")
        out.write("INCOMING_LINKS_STATS:\n")
        out.write(f"{summary['in_degree']}\n")
        out.write("\nOUTGOING_LINKS_STATS:\n")
        out.write(f"{summary['out_degree']}\n")

    return 0


def main(argv: Optional[List[str]] = None) -> None:
    ap = build_parser()
    args = ap.parse_args(argv)
    if args.topk < 0:
        ap.error("--topk must be >= 0")
    if not 0.0 <= args.damping <= 1.0:
        ap.error("--damping must be in [0, 1]")
    if args.max_iter < 1:
        ap.error("--max-iter must be >= 1")
    if args.tol < 0:
        ap.error("--tol must be >= 0")
    if is_gcs_uri(args.input):
        try:
            split_gcs_uri(args.input)
        except ValueError as e:
            ap.error(str(e))
    status = run(args)
    if status:
        raise SystemExit(status)


if __name__ == "__main__":
    main()
