"""Components layer - pure league computation modules.

This layer contains the modules that do the actual work:
- Join index construction and round/leaderboard aggregation
- The seventeen award rules and their shared ranking helper
- Genre classification, taste profiles, music catalog and activity
- CSV ingestion of the exported league tables

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities (pure, stateless)
- components/ = domain logic building blocks (this layer)
- workflows/ = orchestration of components
- services/ = config, wiring, cached state
- interfaces/ = HTTP/CLI presentation
"""
