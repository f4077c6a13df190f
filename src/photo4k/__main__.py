from photo4k.resizer import main

if __name__ == "__main__":
    main()
