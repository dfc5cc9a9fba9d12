from chromerunner import cli

raise SystemExit(cli.main())
