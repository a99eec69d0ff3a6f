"""
Fixed-width IMF text file read by the radiation belt model.

One line per sample:
  YYYY MM DD HH MM SS mmm     bx      by      bz      vx      vy      vz       n        Temp
Field widths below are relied on by the reader, which slices by column.
"""
import os
import logging

from ulfpy.ulfErrors import ULFFormatError, ULFWriteError
from ulfpy.ulfTools import calFields

logger = logging.getLogger(__name__)

#Name, printf format, [start,stop) columns
COLS = [
	('year'  , '%4d'   , ( 0, 4)),
	('month' , '%02d'  , ( 5, 7)),
	('day'   , '%02d'  , ( 8,10)),
	('hour'  , '%02d'  , (11,13)),
	('minute', '%02d'  , (14,16)),
	('second', '%02d'  , (17,19)),
	('ms'    , '%03d'  , (20,23)),
	('bx'    , '%7.1f' , (24,31)),
	('by'    , '%7.1f' , (32,39)),
	('bz'    , '%7.1f' , (40,47)),
	('vx'    , '%7.1f' , (48,55)),
	('vy'    , '%7.1f' , (56,63)),
	('vz'    , '%7.1f' , (64,71)),
	('n'     , '%7.3f' , (72,79)),
	('T'     , '%10.2f', (81,91)),
]
RECLEN = COLS[-1][2][1]

#Single space between fields, two before temperature
recFmt = " ".join([fmt for _,fmt,_ in COLS[:-1]]) + "  " + COLS[-1][1]

def fmtRecord(cal,bx,by,bz,vx,vy,vz,n,T):
	"""
	Format one sample
	cal is the calendar tuple (year,month,day,hour,minute,second,ms)
	"""
	vals = tuple(int(c) for c in cal) + (bx,by,bz,vx,vy,vz,n,T)
	line = recFmt%vals
	if (len(line) != RECLEN):
		#Something spilled over its width and shifted the columns
		for (name,fmt,(i0,i1)),v in zip(COLS,vals):
			if len(fmt%v) > i1-i0:
				raise ULFFormatError("%s = %s does not fit in %d columns"%(name,v,i1-i0))
		raise ULFFormatError("Record has length %d, expected %d"%(len(line),RECLEN))
	return line

def fmtRecords(grid,state):
	cal = calFields(grid)
	return [fmtRecord(cal[i],state.bx[i],state.by[i],state.bz[i],
	                  state.vx[i],state.vy[i],state.vz[i],state.n[i],state.T[i])
	        for i in range(grid.npts)]

def writeIMF(fOut,grid,state):
	"""
	Write the whole series to fOut, overwriting it
	All records are formatted before the file is opened so a formatting
	error never leaves a partial file behind.
	Returns the number of records written.
	"""
	if (grid.npts != state.npts):
		raise ULFFormatError("Time grid has %d samples but state has %d"%(grid.npts,state.npts))
	lines = fmtRecords(grid,state)
	text = "\n".join(lines) + "\n"

	try:
		fDir = os.path.dirname(fOut)
		if fDir:
			os.makedirs(fDir,exist_ok=True)
		with open(fOut,'w') as f:
			f.write(text)
	except OSError as e:
		raise ULFWriteError(e.errno,"Unable to write IMF file %s: %s"%(fOut,e.strerror or e),fOut) from e

	logger.info("Wrote %d records to %s"%(len(lines),fOut))
	return len(lines)

def parseRecord(line):
	""" Pull fields back out of a record by column position """
	line = line.rstrip("\n")
	if (len(line) != RECLEN):
		raise ULFFormatError("Record has length %d, expected %d: '%s'"%(len(line),RECLEN,line))
	rec = {}
	for name,fmt,(i0,i1) in COLS:
		sVal = line[i0:i1]
		try:
			rec[name] = int(sVal) if fmt.endswith('d') else float(sVal)
		except ValueError:
			raise ULFFormatError("Unable to read %s from '%s'"%(name,sVal)) from None
	return rec

def readIMF(fIn):
	with open(fIn,'r') as f:
		return [parseRecord(line) for line in f if line.strip()]
