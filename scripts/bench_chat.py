#!/usr/bin/env python3
"""Benchmark chat: time to first frame and full answer latency (p50, p95, p99).

Usage:
  export API_URL=http://localhost:8000
  python scripts/bench_chat.py [--ingest] [--num-questions 20] [--question "..."]
"""
from __future__ import annotations

import argparse
import json
import os
import statistics
import time

import httpx


def ask(client: httpx.Client, api_url: str, question: str) -> tuple[float, float, str]:
    """Submit question and drain its stream. Returns (first frame s, total s, answer)."""
    t0 = time.perf_counter()
    r = client.post(f"{api_url}/v1/chat", json={"message": question})
    r.raise_for_status()
    conversation_id = r.json()["conversation_id"]

    first = None
    answer = ""
    with client.stream("GET", f"{api_url}/v1/chat/{conversation_id}/stream") as stream:
        stream.raise_for_status()
        event = None
        for line in stream.iter_lines():
            if line.startswith("event: "):
                event = line[len("event: "):]
                continue
            if not line.startswith("data: "):
                continue
            payload = json.loads(line[len("data: "):])
            if event == "error":
                raise RuntimeError(payload.get("message", "generation failed"))
            if first is None:
                first = time.perf_counter() - t0
            if payload.get("done"):
                answer = payload.get("text", "")
                break
    total = time.perf_counter() - t0
    return first if first is not None else total, total, answer


def percentile(values: list[float], q: float) -> float:
    ordered = sorted(values)
    return ordered[max(int(len(ordered) * q) - 1, 0)]


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark chat streaming")
    parser.add_argument("--ingest", action="store_true", help="Run /v1/index/ingest before asking")
    parser.add_argument("--num-questions", type=int, default=10, help="Number of questions to ask")
    parser.add_argument("--question", type=str, default="What is this knowledge base about?")
    parser.add_argument("--output", type=str, default="", help="Optional summary output file")
    args = parser.parse_args()

    api_url = os.environ.get("API_URL", "http://localhost:8000").rstrip("/")

    with httpx.Client(timeout=120.0) as client:
        if args.ingest:
            print("Ingesting documents...")
            r = client.post(f"{api_url}/v1/index/ingest")
            print(f"  {r.status_code}: {r.json().get('message')}")
            r.raise_for_status()

        firsts: list[float] = []
        totals: list[float] = []
        errors = 0
        answer = ""
        print(f"Asking {args.num_questions} questions...")
        for _ in range(args.num_questions):
            try:
                first, total, answer = ask(client, api_url, args.question)
            except (httpx.HTTPError, RuntimeError) as e:
                errors += 1
                print(f"  error: {e}")
                continue
            firsts.append(first)
            totals.append(total)

    n = len(totals)
    if n == 0:
        print("No successful answers.")
        return 1

    summary = (
        f"Chat benchmark (questions={n}, errors={errors})\n"
        f"  First frame: p50={statistics.median(firsts) * 1000:.1f} ms, "
        f"p95={percentile(firsts, 0.95) * 1000:.1f} ms\n"
        f"  Full answer: p50={statistics.median(totals) * 1000:.1f} ms, "
        f"p95={percentile(totals, 0.95) * 1000:.1f} ms, "
        f"p99={percentile(totals, 0.99) * 1000:.1f} ms\n"
        f"  Last answer: {answer[:200]!r}\n"
    )
    print(summary)

    if args.output:
        os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(summary)
        print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
