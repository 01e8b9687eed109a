from ssm.cli.main import main

raise SystemExit(main())
