"""Version information for leaguestats."""

# Semantic versioning: MAJOR.MINOR.PATCH
# MAJOR: Breaking changes to report structures or CLI/API contracts
# MINOR: New awards, commands or endpoints, backward compatible
# PATCH: Bug fixes, backward compatible

__version__ = "0.3.0"
__version_info__ = tuple(int(x) for x in __version__.split("."))

# Version history:
# 0.3.0 - Read-only HTTP API and JSON export
#         - /api/league endpoints backed by LeagueService
#         - `league export` writes the full report as JSON
#         - Activity calendar grouped by configured timezone
# 0.2.0 - Taste profiles and music catalog
#         - Genre classifier driven by bundled artist_genres.yaml
#         - Greedy unique archetype assignment
#         - Artist / album / genre statistics, top tracks
# 0.1.0 - Initial release
#         - CSV ingestion, round results, leaderboard
#         - Seventeen award rules
