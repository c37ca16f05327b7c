"""Allow ``python -m ci_demo_utils``."""

from ci_demo_utils.main import main

main()
