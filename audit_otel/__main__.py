import sys

from audit_otel.main import main

sys.exit(main())
