"""Blog-to-video pipeline orchestrator.

Turns a blog article into a short explainer video by driving three external
tools in sequence:
- image compositor: renders the header/title card
- narrator: extracts the article and synthesizes the voice-over
- muxer: combines the card and the narration into an mp4
"""

__version__ = "0.1.0"
