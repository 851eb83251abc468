from turtlehost.cli import main

main()
