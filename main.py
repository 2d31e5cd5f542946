from __future__ import annotations

import sys

from blog_to_video.cli import main

if __name__ == "__main__":
    sys.exit(main())
