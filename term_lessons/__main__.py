import sys

from term_lessons.main import main

sys.exit(main())
