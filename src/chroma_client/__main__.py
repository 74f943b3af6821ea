import sys

from chroma_client.cli import main

sys.exit(main())
