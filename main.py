from rich.pretty import pprint

from clinter import *

parser = Parser("clinter-demo")


@parser.register("build <path>", [
    Option("out", type=OptionKind.STRING, alias="o"),
    Option("jobs", type=OptionKind.NUMBER, alias="j"),
    Option("verbose", type=OptionKind.BOOLEAN, alias="v"),
])
def build(values):
    pprint(values)


@parser.register("init", [{"name": "force", "type": "boolean", "alias": "f"}])
def init(values):
    def answered(name):
        pprint({"name": name, **values})

    parser.ask("Project name?", answered).result()


if __name__ == '__main__':
    parser.parse()
