from neocities_client.cli import main

raise SystemExit(main())
