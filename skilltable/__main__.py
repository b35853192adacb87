from skilltable.cli import main

raise SystemExit(main())
