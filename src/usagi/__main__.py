"""Allow running Usagi with ``python -m usagi``."""
from usagi.cli.main import main

main()
