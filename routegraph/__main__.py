from routegraph.cli import main

main()
