import sys

from ultrastar_txt import PlayerChange, parse_song

text = """#TITLE:Testsong
#ARTIST:Testartist
#MP3:Testfile.mp3
#BPM:123
P1
: 0 4 59 Test
* 4 4 59 test
- 10
P2
F 12 4 59 ing
E"""
song = parse_song(text)

# Access header fields
sys.stdout.write(f"{song.header.artist} - {song.header.title}\n")  # "Testartist - Testsong"

# Access notes line by line
for line in song.lines:
    sys.stdout.write(f"line at beat {line.start}\n")
    for note in line.notes:
        if isinstance(note, PlayerChange):
            sys.stdout.write(f"  player {note.player}\n")
        else:
            sys.stdout.write(f"  {note.text!r} {note.pitch_name()}\n")
