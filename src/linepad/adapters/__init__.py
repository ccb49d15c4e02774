"""Front ends that drive an ``EditorSession``."""
