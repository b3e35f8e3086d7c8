"""Simple example showing resource-defined policies and enforcement."""

from ablegate import Authority, Transgression, build_helpers


class Article:
    """Articles may be edited by their author; listing depends on context."""

    def __init__(self, title, author):
        self.title = title
        self.author = author

    def updatable_by(self, user):
        return user == self.author

    def default_policy(self, predicate):
        # Anything not spelled out is read-only.
        return predicate == "viewable"

    @classmethod
    def indexable_by(cls, user, context):
        return context.get("domain") == "public"


def main():
    authority = Authority()
    authority.register("index", "indexable")

    article = Article("Hello", author="ann")

    print("ann may update:", authority.resolve("ann", "update", article))
    print("bob may update:", authority.resolve("bob", "update", article))
    print("bob may view:", authority.resolve("bob", "view", article))
    print("bob may destroy:", authority.resolve("bob", "destroy", article))
    print(
        "public index:",
        authority.resolve("bob", "index", Article, {"domain": "public"}),
    )

    decision = authority.explain("bob", "destroy", article)
    print(f"destroy decided by {decision.source.value} at {decision.scope.value} scope")

    helpers = build_helpers(authority)
    try:
        helpers.enforce_update_permission("bob", article)
    except Transgression as e:
        print(f"Denied: {e}")


if __name__ == "__main__":
    main()
