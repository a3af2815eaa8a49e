"""
Command line interface for resumeflow.

This module exposes subcommands to run each stage of the pipeline:
storing the Firecrawl API key, fetching a profile with its reference
pages, synthesizing a résumé from a fetched profile and printing a
résumé.  `run` chains fetch and synthesis in one go.  Intermediate
results are plain JSON files, so a fetched profile can be turned into
a résumé later or edited by hand in between.

Without an API key (neither stored with `set-key` nor provided through
the ``FIRECRAWL_API_KEY`` environment variable) the fetch step
produces sample data instead of crawling.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Dict, List

from dotenv import load_dotenv

from .collect.runner import fetch_profile_data_sync
from .config import load_config
from .errors import InvalidUrl
from .ingest.credentials import CredentialStore, FileCredentialStore, InMemoryCredentialStore
from .ingest.firecrawl_adapter import CrawlClient
from .normalize.schema import AggregatedFetchResult, ProfileRecord
from .resume.report import format_resume
from .resume.schema import load_resume_json, save_resume_json
from .resume.synthesize import profile_to_resume
from .urls import is_profile_url

logger = logging.getLogger("resumeflow.cli")


def _credential_store(cfg: Dict[str, object]) -> CredentialStore:
    env_key = os.getenv("FIRECRAWL_API_KEY")
    if env_key:
        return InMemoryCredentialStore(env_key)
    return FileCredentialStore(cfg["credentials"]["path"])  # type: ignore[index]


def _build_client(cfg: Dict[str, object]) -> CrawlClient:
    timeout = cfg["crawl"].get("timeout_seconds")  # type: ignore[union-attr]
    return CrawlClient(_credential_store(cfg), timeout=float(timeout) if timeout else None)


def _fetch(args: argparse.Namespace) -> AggregatedFetchResult:
    if not is_profile_url(args.url):
        raise InvalidUrl(f"Not a valid X profile URL: {args.url}")
    return fetch_profile_data_sync(args.url, args.ref or [], client=_build_client(args.cfg))


def _write_json(data: Dict[str, object], path: str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def _load_profile(path: str) -> ProfileRecord:
    """Read a profile from a `fetch` output file or a bare profile JSON."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if "profile" in data:
        return AggregatedFetchResult.from_dict(data).profile
    return ProfileRecord.from_dict(data)


def cmd_set_key(args: argparse.Namespace) -> None:
    """Persist the Firecrawl API key."""
    if not args.key.strip():
        raise ValueError("API key must not be empty")
    FileCredentialStore(args.cfg["credentials"]["path"]).set(args.key)


def cmd_fetch(args: argparse.Namespace) -> None:
    """Fetch a profile and its references and write them as JSON."""
    result = _fetch(args)
    out = args.out or args.cfg["output"]["profile"]
    _write_json(result.to_dict(), out)
    logger.info(
        "Profile %s with %d references written to %s",
        result.profile.username,
        len(result.references),
        out,
    )


def cmd_resume(args: argparse.Namespace) -> None:
    """Synthesize a résumé from a fetched profile."""
    profile = _load_profile(args.profile)
    out = args.out or args.cfg["output"]["resume"]
    save_resume_json(profile_to_resume(profile), out)


def cmd_run(args: argparse.Namespace) -> None:
    """Fetch a profile and synthesize a résumé in one step."""
    result = _fetch(args)
    if args.profile_out:
        _write_json(result.to_dict(), args.profile_out)
    resume = profile_to_resume(result.profile)
    out = args.out or args.cfg["output"]["resume"]
    save_resume_json(resume, out)
    print(format_resume(resume))


def cmd_show(args: argparse.Namespace) -> None:
    """Print a résumé JSON file as plain text."""
    print(format_resume(load_resume_json(args.resume)))


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="resumeflow", description="Build a résumé from an X profile")
    parser.add_argument("--config", help="YAML config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    key_cmd = subparsers.add_parser("set-key", help="Store the Firecrawl API key")
    key_cmd.add_argument("key", help="Firecrawl API key")
    key_cmd.set_defaults(func=cmd_set_key)

    def add_fetch_args(cmd: argparse.ArgumentParser) -> None:
        cmd.add_argument("--url", required=True, help="X profile URL, e.g. https://x.com/username")
        cmd.add_argument(
            "--ref",
            action="append",
            help="Reference URL (portfolio, code hosting page); may be repeated",
        )

    fetch_cmd = subparsers.add_parser("fetch", help="Fetch profile data")
    add_fetch_args(fetch_cmd)
    fetch_cmd.add_argument("--out", help="Output JSON path")
    fetch_cmd.set_defaults(func=cmd_fetch)

    resume_cmd = subparsers.add_parser("resume", help="Synthesize a résumé from fetched profile JSON")
    resume_cmd.add_argument("--profile", required=True, help="Path to profile JSON")
    resume_cmd.add_argument("--out", help="Output JSON path")
    resume_cmd.set_defaults(func=cmd_resume)

    run_cmd = subparsers.add_parser("run", help="Fetch a profile and synthesize a résumé")
    add_fetch_args(run_cmd)
    run_cmd.add_argument("--out", help="Output résumé JSON path")
    run_cmd.add_argument("--profile-out", dest="profile_out", help="Also write the fetched profile JSON here")
    run_cmd.set_defaults(func=cmd_run)

    show_cmd = subparsers.add_parser("show", help="Print a résumé JSON file")
    show_cmd.add_argument("--resume", required=True, help="Path to résumé JSON")
    show_cmd.set_defaults(func=cmd_show)

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    load_dotenv()
    try:
        args.cfg = load_config(args.config)
        args.func(args)
    except (InvalidUrl, ValueError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        sys.exit(2)


if __name__ == "__main__":
    main(sys.argv[1:])
