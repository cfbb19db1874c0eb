from chat_core.cli.app import main

raise SystemExit(main())
