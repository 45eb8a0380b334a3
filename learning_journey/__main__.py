from learning_journey.main import main

raise SystemExit(main())
