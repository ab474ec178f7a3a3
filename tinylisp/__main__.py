from tinylisp.cmdline import main

main()
