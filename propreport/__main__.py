# propreport/__main__.py
import sys

from propreport.cli.main import main

sys.exit(main())
