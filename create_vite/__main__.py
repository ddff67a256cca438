from create_vite.cli import main

raise SystemExit(main())
