#!/usr/bin/env python3
"""
Text Builder - Assemble the text that gets embedded for candidates and jobs.

The embedding cache decides staleness by exact string equality between the
stored source text and the text built here. Any change to field order,
separators or defaults therefore invalidates every cached embedding on the
next scoring run. Keep the layout stable:

    candidate: "<skills joined by ', '> <bio> <current_role>"
    job:       "<title> <description> <required joined by ', '> <preferred joined by ', '>"

Both are stripped of leading/trailing whitespace; missing fields become "".
"""

from core.matcher.models import CandidateProfile, JobProfile


def build_candidate_text(candidate: CandidateProfile) -> str:
    skills = ", ".join(candidate.skills or [])
    return f"{skills} {candidate.bio or ''} {candidate.current_role or ''}".strip()


def build_job_text(job: JobProfile) -> str:
    required = ", ".join(job.required_skills or [])
    preferred = ", ".join(job.preferred_skills or [])
    return f"{job.title or ''} {job.description or ''} {required} {preferred}".strip()
