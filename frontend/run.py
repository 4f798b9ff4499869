"""
Simple runner script for the study guide viewer

This script launches the Streamlit application with optimal settings.
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path


def main():
    """Launch the Streamlit application"""

    parser = argparse.ArgumentParser(description="Open a Markdown study guide in the browser.")
    parser.add_argument(
        "document",
        nargs="?",
        help="Path or http(s) URL of the study guide (defaults to the bundled guide)",
    )
    parser.add_argument("--state-path", help="JSON file holding visited sections and theme")
    parser.add_argument("--port", type=int, default=8501)
    args = parser.parse_args()

    # Get the path to the app
    app_path = Path(__file__).parent / "app.py"

    # Check if app exists
    if not app_path.exists():
        print(f"Error: Could not find app.py at {app_path}")
        sys.exit(1)

    env = dict(os.environ)
    if args.document:
        env["STUDYGUIDE_DOCUMENT"] = args.document
    if args.state_path:
        env["STUDYGUIDE_STATE_PATH"] = args.state_path

    print("Starting study guide viewer...")
    print(f"App location: {app_path}")
    print(f"Opening browser at http://localhost:{args.port}")
    print("\n" + "="*60)
    print("Press Ctrl+C to stop the server")
    print("="*60 + "\n")

    # Run streamlit
    try:
        subprocess.run([
            "streamlit", "run", str(app_path),
            "--server.headless", "true",
            "--server.port", str(args.port),
            "--browser.gatherUsageStats", "false",
        ], env=env)
    except KeyboardInterrupt:
        print("\n\nShutting down server...")
    except FileNotFoundError:
        print("\nError: Streamlit is not installed or not in PATH")
        print("Please install it with: pip install streamlit")
        sys.exit(1)

if __name__ == "__main__":
    main()
