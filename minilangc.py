from minilang.tools    import Tools
from minilang.program  import Program
from minilang.reporter import Reporter

def main(argv = None):
    """
    usage:
    minilangc [--ast] [--strict] [--json PATH] [-v] [<filename>.minilang]

    prints tokens, stage verdicts and three-address code
    exits with status 1 at the first error
    """
    # preliminary objects
    reporter    = Reporter()
    tools       = Tools(reporter)

    # parse args
    reporter.checkpoint("parsing")
    options = tools.parseargs(argv)
    reporter.verbose = options.verbose

    # read source
    reporter.checkpoint("reading")
    source = tools.read(options.input)

    # source to tac
    tac = Program(reporter, options).compile(source)

    # tac to json file
    if options.json:
        reporter.checkpoint("json wr")
        tools.writejson(Program.to_json(tac), options.json)

    return 0


if __name__ == "__main__":
    main()
