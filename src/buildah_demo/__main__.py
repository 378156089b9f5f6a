"""Allow ``python -m buildah_demo`` (the container entrypoint)."""

from buildah_demo.main import main

if __name__ == "__main__":
    main()
