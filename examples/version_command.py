from switchyard import CommandHandler, Dispatcher, SwitchDescriptor
from switchyard.console import print_lines


class VersionCommand(CommandHandler):
    primary_name = "version"
    names = ("version",)
    usage_text = "version - Prints the version of the application."
    switches = (
        SwitchDescriptor(
            names=["long"],
            short_names=["l"],
            usage_text="Include build details.",
        ),
    )

    def process_command(self, args):
        self.write_text("Version: 1.0.0.0")
        if self.is_set("long"):
            self.write_text("Built with Switchyard.")


def main():
    print_lines(Dispatcher([VersionCommand()]).process(["version", "--long"]))
    print_lines(Dispatcher([VersionCommand()]).process(["version", "-?"]))
    print_lines(Dispatcher([VersionCommand()]).process(["version", "--notdefined"]))


if __name__ == "__main__":
    main()
