from rich.pretty import pprint

from trieparse import *

parser = Parser(shell=True, colorful=True)
parser.add("-test").alias("-t").store("test")
parser.add("-fdebug").store("debug")
parser.gets("-f", print)
parser.add("echo").follow(print)


if __name__ == '__main__':
    pprint(parser)
    pprint(parser.parse())
