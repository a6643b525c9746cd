from televisor.app import main

raise SystemExit(main())
