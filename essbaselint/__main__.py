from essbaselint.cli import main

raise SystemExit(main())
