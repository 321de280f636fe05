import os
import tempfile

# Keep saved apps from tests out of the source tree
os.environ.setdefault("APPBUILDER_WORKSPACE_ROOT", tempfile.mkdtemp(prefix="appbuilder-test-"))
