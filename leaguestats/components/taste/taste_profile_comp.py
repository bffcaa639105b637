"""
Taste profiles and archetype assignment.

Each competitor gets a submission genre histogram (what they bring) and a voting
genre histogram (what they reward), and is matched to one named archetype from a
fixed pool. Archetypes are unique per league until the pool runs out.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence

from leaguestats.components.genres.genre_classifier_comp import GenreClassifier
from leaguestats.helpers.dto.league_dto import Competitor, JoinIndex, Submission
from leaguestats.helpers.dto.taste_dto import (
    Archetype,
    ArchetypeCandidate,
    GenreCount,
    GenrePoints,
    GenreShare,
    TasteProfile,
)
from leaguestats.helpers.parse_helper import split_artists

logger = logging.getLogger(__name__)

AFFINITY_WEIGHT = 10
BREAKDOWN_SIZE = 6
TOP_GENRES_SIZE = 3
TOP_ARTISTS_SIZE = 5
VOTING_PREFERENCE_SIZE = 5

ARCHETYPE_POOL: tuple[Archetype, ...] = (
    Archetype("The Indie Purist", "🎸", ("indie rock", "indie folk", "alternative", "garage rock")),
    Archetype("The Night Owl", "🌙", ("electronic", "house", "techno", "dance", "uk garage")),
    Archetype("The Beats Enthusiast", "🎤", ("hip-hop", "rap", "grime", "uk hip-hop")),
    Archetype("The Classic Rocker", "🤘", ("rock", "hard rock", "classic rock", "blues rock")),
    Archetype("The Smooth Operator", "🎷", ("jazz", "soul", "r&b", "neo-soul")),
    Archetype("The Chill Viber", "🌴", ("reggae", "ska", "dub", "dancehall")),
    Archetype("The Rebel", "⚡", ("punk rock", "post-punk", "hardcore punk", "emo")),
    Archetype("The Storyteller", "📖", ("folk", "singer-songwriter", "americana", "country")),
    Archetype("The Crowd Pleaser", "✨", ("pop", "dance pop", "synth-pop")),
    Archetype("The Deep Thinker", "🌀", ("progressive rock", "art rock", "psychedelic rock")),
    Archetype("The Sensitive Soul", "🍂", ("indie folk", "dream pop", "slowcore", "shoegaze")),
    Archetype("The Eclectic Tastemaker", "🎭", ("art pop", "experimental", "avant-garde")),
    Archetype("The Nostalgia Hunter", "📼", ("new wave", "synth-pop", "80s", "disco")),
    Archetype("The World Traveler", "🌍", ("afrobeat", "mpb", "tropicália", "world", "latin")),
    Archetype("The Underground Explorer", "🔦", ("idm", "ambient", "experimental", "hyperpop")),
    Archetype("The Dancefloor General", "🪩", ("disco", "funk", "dance", "house")),
    Archetype("The Vinyl Collector", "💿", ("soul", "funk", "jazz", "classic rock")),
    Archetype("The Festival Goer", "🎪", ("indie rock", "electronic", "alternative")),
    Archetype("The Bedroom DJ", "🎚️", ("electronic", "drum and bass", "jungle", "uk bass")),
    Archetype("The Melancholy Romantic", "🥀", ("dream pop", "shoegaze", "post-rock", "gothic rock")),
    Archetype("The Celtic Soul", "☘️", ("irish trad", "folk", "celtic", "folk punk")),
    Archetype("The Headphone Hermit", "🎧", ("ambient", "post-rock", "electronic", "idm")),
    Archetype("The Singalong Champion", "🎵", ("pop rock", "britpop", "power pop", "indie pop")),
    Archetype("The Riff Master", "🔥", ("heavy metal", "hard rock", "alternative metal", "nu metal")),
    Archetype("The Groove Seeker", "🕺", ("funk", "disco", "r&b", "soul")),
    Archetype("The Genre Bender", "🔀", ("alternative", "experimental", "art rock")),
    Archetype("The Sunset Chaser", "🌅", ("indie pop", "dream pop", "chillwave")),
    Archetype("The Late Night Philosopher", "🌃", ("post-punk", "gothic rock", "darkwave")),
)

FALLBACK_ARCHETYPE = Archetype("The Music Lover", "🎶", ())


# ──────────────────────────────────────────────────────────────────────
# Archetype scoring and assignment
# ──────────────────────────────────────────────────────────────────────


def score_archetype(archetype: Archetype, breakdown: Sequence[GenreCount]) -> int:
    """
    Affinity of an archetype for a genre histogram.

    Every (archetype genre, histogram genre) pair where one contains the other
    (case-insensitive) adds the histogram count times AFFINITY_WEIGHT.
    """
    counts: dict[str, int] = {}
    for entry in breakdown:
        counts[entry.genre.lower()] = entry.count

    score = 0
    for target in archetype.genres:
        for genre, count in counts.items():
            if target in genre or genre in target:
                score += count * AFFINITY_WEIGHT
    return score


def assign_archetypes(
    candidates: Sequence[ArchetypeCandidate],
    pool: Sequence[Archetype] = ARCHETYPE_POOL,
    fallback: Archetype = FALLBACK_ARCHETYPE,
) -> dict[str, Archetype]:
    """
    Greedy unique assignment of archetypes to competitors.

    Competitors with the strongest best match choose first and take their
    highest-scoring unclaimed archetype. Once the pool is exhausted every further
    competitor gets `fallback`. Single pass; not an optimal matching.

    Returns:
        competitor_id -> assigned archetype
    """
    preferences: list[tuple[str, list[tuple[Archetype, int]]]] = []
    for candidate in candidates:
        scored = [(archetype, score_archetype(archetype, candidate.genre_breakdown)) for archetype in pool]
        scored.sort(key=lambda item: item[1], reverse=True)
        preferences.append((candidate.competitor_id, scored))

    preferences.sort(key=lambda item: item[1][0][1] if item[1] else 0, reverse=True)

    claimed: set[str] = set()
    assignments: dict[str, Archetype] = {}
    for competitor_id, scored in preferences:
        choice = next((archetype for archetype, _ in scored if archetype.name not in claimed), None)
        if choice is None:
            choice = next((archetype for archetype in pool if archetype.name not in claimed), None)
        if choice is None:
            assignments[competitor_id] = fallback
            continue
        claimed.add(choice.name)
        assignments[competitor_id] = choice

    return assignments


# ──────────────────────────────────────────────────────────────────────
# Histograms
# ──────────────────────────────────────────────────────────────────────


class _Histograms:
    __slots__ = ("artists", "genres", "submission_count", "voting_genres")

    def __init__(self) -> None:
        self.artists: dict[str, None] = {}  # insertion-ordered set
        self.genres: dict[str, int] = {}
        self.submission_count = 0
        self.voting_genres: dict[str, int] = {}


def _credited_artists(credit: str) -> list[str]:
    return [artist for artist in split_artists(credit) if artist]


def build_histograms(
    submissions: Sequence[Submission],
    index: JoinIndex,
    classifier: GenreClassifier,
) -> dict[str, _Histograms]:
    """Per-competitor submission and voting histograms keyed by competitor id."""
    histograms: dict[str, _Histograms] = {}

    for submission in submissions:
        profile = histograms.setdefault(submission.submitter_id, _Histograms())
        profile.submission_count += 1
        for artist in _credited_artists(submission.artists):
            profile.artists[artist] = None
            for genre in classifier.classify(artist):
                profile.genres[genre] = profile.genres.get(genre, 0) + 1

    for vote in index.resolved_votes:
        if vote.points <= 0:
            continue
        profile = histograms.setdefault(vote.voter_id, _Histograms())
        voted = index.submission_of[vote.key]
        for artist in _credited_artists(voted.artists):
            for genre in classifier.classify(artist):
                profile.voting_genres[genre] = profile.voting_genres.get(genre, 0) + vote.points

    return histograms


def _top(counts: dict[str, int], size: int) -> list[tuple[str, int]]:
    return sorted(counts.items(), key=lambda item: item[1], reverse=True)[:size]


def _percentage(count: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(count / total * 100 + 0.5)


# ──────────────────────────────────────────────────────────────────────
# Profiles
# ──────────────────────────────────────────────────────────────────────


def compute_taste_profiles(
    competitors: Sequence[Competitor],
    submissions: Sequence[Submission],
    index: JoinIndex,
    classifier: GenreClassifier,
) -> list[TasteProfile]:
    """
    Build one taste profile per competitor.

    Args:
        competitors: Competitor table (its order breaks ties)
        submissions: Submissions table
        index: Join index for the snapshot
        classifier: Genre classifier for artist credits

    Returns:
        Profiles sorted by submission count descending
    """
    histograms = build_histograms(submissions, index, classifier)
    empty = _Histograms()

    candidates = [
        ArchetypeCandidate(
            competitor_id=competitor.id,
            genre_breakdown=tuple(
                GenreCount(genre, count)
                for genre, count in _top(histograms.get(competitor.id, empty).genres, BREAKDOWN_SIZE)
            ),
        )
        for competitor in competitors
    ]
    assignments = assign_archetypes(candidates)

    profiles: list[TasteProfile] = []
    for competitor in competitors:
        profile = histograms.get(competitor.id, empty)
        total = sum(profile.genres.values())
        breakdown = tuple(
            GenreShare(genre=genre, count=count, percentage=_percentage(count, total))
            for genre, count in _top(profile.genres, BREAKDOWN_SIZE)
        )
        archetype = assignments.get(competitor.id, FALLBACK_ARCHETYPE)
        artists = list(profile.artists)

        profiles.append(
            TasteProfile(
                competitor_id=competitor.id,
                competitor_name=competitor.name,
                unique_artists=len(artists),
                top_artists=tuple(artists[:TOP_ARTISTS_SIZE]),
                submission_count=profile.submission_count,
                genre_breakdown=breakdown,
                top_genres=tuple(share.genre for share in breakdown[:TOP_GENRES_SIZE]),
                voting_genre_preference=tuple(
                    GenrePoints(genre=genre, points_given=points)
                    for genre, points in _top(profile.voting_genres, VOTING_PREFERENCE_SIZE)
                ),
                personality_name=archetype.name,
                personality_emoji=archetype.emoji,
            )
        )

    profiles.sort(key=lambda p: p.submission_count, reverse=True)
    logger.debug("Built %d taste profiles", len(profiles))
    return profiles
