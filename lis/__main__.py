from lis.repl import main

main()
