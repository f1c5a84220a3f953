import argparse
from pathlib import Path

from moxie import Mock, MoxieConfig
from moxie.logging_utils import configure_logging


class Greeter:
    def greet(self, name: str) -> str:
        raise NotImplementedError


class FakeGreeter(Greeter, Mock):
    def greet(self, name: str) -> str:
        return self.intercept("greet", name, expected_type=str, default="")


def main() -> None:
    parser = argparse.ArgumentParser(description="Stub a greeter and print its interaction report.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log engine events")
    parser.add_argument("--log-file", type=Path, default=None, help="Also write engine events to this file")
    args = parser.parse_args()

    config = MoxieConfig(verbose=args.verbose)
    configure_logging(config, log_file=args.log_file)

    greeter = FakeGreeter()
    greeter.moxie_config = config
    greeter.stub("greet", ["Ada"], ["Hello, Ada", "Welcome back, Ada"])

    for name in ["Ada", "Ada", "Ada", "Grace"]:
        print(repr(greeter.greet(name)))

    print()
    print(greeter.interaction_report("greet"))


if __name__ == "__main__":
    main()
