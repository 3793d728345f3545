from sdp_repeat_parser.repeat_times import ParseError, repeat_times


print("Enter the value of an SDP repeat field:")
print("    " + repeat_times.description().message)
print("e.g.")
print("    r=604800 3600 0 90000")
print("    r=7d 1h 0 25h")

while True:
    try:
        line = input(">>> ")
    except (KeyboardInterrupt, EOFError):
        print("\nBye!")
        break

    if not line:
        continue

    line = line.removeprefix("r=")

    try:
        _, repeat = repeat_times.parse(line)
    except ParseError as exc:
        print(exc.describe())
    else:
        print("every {0}s, active for {1}s".format(repeat.repeat_interval, repeat.active_duration))
        for offset in repeat.offsets:
            print("    +{0}s".format(offset))
