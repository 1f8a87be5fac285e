from invoicing.main import main

raise SystemExit(main())
