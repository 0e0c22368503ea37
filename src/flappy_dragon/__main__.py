from .flappy_client import main

raise SystemExit(main())
