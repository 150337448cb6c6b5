from l4_merge.cli import main

if __name__ == "__main__":
    main()
