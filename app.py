#!/usr/bin/env python3
"""
Family Tree API - development server entry point
"""

import os

from dotenv import load_dotenv

from family_tree import create_app


def main_cli():
    """CLI entry point"""
    load_dotenv()
    app = create_app()

    port = int(os.environ.get('HTTP_PORT', '8080'))
    print("Family Tree API")
    print("=" * 50)
    print(f"Listening on http://localhost:{port}")
    print()

    app.run(debug=os.environ.get('FLASK_DEBUG') == '1', host='0.0.0.0', port=port)


if __name__ == '__main__':
    main_cli()
