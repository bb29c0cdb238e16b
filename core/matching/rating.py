#!/usr/bin/env python3
"""
Rating Scoring - star rating plus a track-record bonus.

Unrated professionals get a neutral 50 rather than a low score.
"""

from typing import Optional

NEW_PROFESSIONAL_SCORE = 50.0
POINTS_PER_STAR = 20.0
POINTS_PER_COMPLETED_JOB = 0.5
MAX_TRACK_RECORD_POINTS = 10.0


def _is_unrated(rating: Optional[float]) -> bool:
    return rating is None or float(rating) == 0.0


def calculate_rating_score(rating: Optional[float], total_jobs_completed: Optional[int]) -> float:
    if _is_unrated(rating):
        return NEW_PROFESSIONAL_SCORE

    base_score = float(rating) * POINTS_PER_STAR

    track_record_bonus = 0.0
    if total_jobs_completed and total_jobs_completed > 0:
        track_record_bonus = min(MAX_TRACK_RECORD_POINTS, total_jobs_completed * POINTS_PER_COMPLETED_JOB)

    return min(100.0, base_score + track_record_bonus)


def generate_rating_reason(rating: Optional[float], total_jobs_completed: Optional[int]) -> str:
    if _is_unrated(rating):
        return "New professional - no reviews yet"
    return f"{float(rating):.1f} star rating based on {total_jobs_completed or 0} completed jobs"
