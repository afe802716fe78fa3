"""
path_store — Hello World

Values live in nested dicts addressed by dotted paths.
Every segment a read or write visits is gated by the store's policy.
"""

from path_store import PathStore, PermissionDeniedError, Restrict, permissions_of

# ─── Declared permissions (metadata only; the store does not consult it) ───


class UserProfile:
    name = Restrict("rw")
    email = Restrict("read-only")


def main():
    # ──────────────────────────────────────
    #  1. Create the store
    # ──────────────────────────────────────
    store = PathStore()

    # ──────────────────────────────────────
    #  2. Write values (intermediate mappings are created on demand)
    # ──────────────────────────────────────
    store.write("user.name", "Ada")
    store.write_entries({"user.email": "ada@example.com", "settings.theme": "dark"})

    print(f"  user.name   = {store.read('user.name')!r}")
    print(f"  user.age    = {store.read('user.age')!r}")
    print(f"  entries()   = {store.entries()}")

    # ──────────────────────────────────────
    #  3. Lock the store down
    # ──────────────────────────────────────
    store.default_policy = "read-only"
    try:
        store.write("user.name", "Grace")
    except PermissionDeniedError as e:
        print(f"  [DENIED] {e}")

    print(f"  declared    = {permissions_of(UserProfile)}")


if __name__ == "__main__":
    main()
