from nananiji.cli import main

raise SystemExit(main())
