"""
Resumeflow package.

This package turns a public X (Twitter) profile, plus any number of
reference pages such as a portfolio or a code hosting profile, into an
editable résumé skeleton.  Each submodule implements one step of the
pipeline.

The high‑level flow is:

1. **collect** – Validate the submitted URLs and orchestrate the
   fetch.  The aggregator crawls the profile and every reference page,
   tolerates per‑page failures and falls back to synthetic data when
   the crawl cannot run at all.
2. **ingest** – Speak to external providers.  The Firecrawl adapter
   wraps the scraping API and the mock adapter produces plausible
   profile data without touching the network.  Credentials live in a
   small key‑value store.
3. **normalize** – Convert labelled crawl records into the structured
   `ProfileRecord` and `ReferenceRecord` dataclasses using regex
   heuristics and a fixed skill vocabulary.
4. **resume** – Map an aggregated profile into a `ResumeRecord`,
   apply user edits and export the result.
5. **cli** – Command line entry point wiring together the above
   components.
"""

__version__ = "0.1.0"
