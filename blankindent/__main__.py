from blankindent.cli import main

main(prog_name="blankindent")
