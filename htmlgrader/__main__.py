from htmlgrader.cli import main

main()
